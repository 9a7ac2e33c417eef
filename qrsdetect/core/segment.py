# qrsdetect/core/segment.py
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator

import numpy as np

from .exceptions import DetectionError, InvalidSegment
from .params import DetectorParams
from .signal import EcgSignal


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """
    A Segment is a contiguous window [start, end) of an EcgSignal.

    Design goals:
    - cheap: arrays are views into the parent signal
    - safe: bounds are validated on construction
    - local: detection works in segment coordinates, 0..n
    """
    index: int
    start: int
    end: int
    signal: EcgSignal = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.signal, EcgSignal):
            raise InvalidSegment("Segment.signal must be an EcgSignal instance.")
        if self.index < 0:
            raise InvalidSegment(f"Segment.index must be >= 0, got {self.index}.")
        if not (0 <= self.start < self.end <= self.signal.n):
            raise InvalidSegment(
                f"Segment bounds [{self.start}, {self.end}) out of range for "
                f"{self.signal.n} samples."
            )

    def __len__(self) -> int:
        return self.n

    @property
    def n(self) -> int:
        return self.end - self.start

    @property
    def time(self) -> np.ndarray:
        return self.signal.time[self.start:self.end]

    @property
    def voltage(self) -> np.ndarray:
        return self.signal.voltage[self.start:self.end]

    @property
    def t_start(self) -> float:
        return float(self.signal.time[self.start])

    @property
    def t_end(self) -> float:
        return float(self.signal.time[self.end - 1])

    def to_signal(self) -> EcgSignal:
        return self.signal.slice(self.start, self.end)


def iter_segments(
    signal: EcgSignal,
    fs: float,
    params: DetectorParams | None = None,
) -> Iterator[Segment]:
    """
    Yield fixed-length segments of `signal` in order.

    The last segment holds the remainder. Any segment shorter than
    `params.min_segment_sec` is skipped.
    """
    params = params or DetectorParams()
    size = params.segment_size(fs)
    min_len = params.min_segment_size(fs)
    if size < 1:
        raise DetectionError(f"Segment size is {size} samples at fs={fs:.2f} Hz.")

    n = signal.n
    k = 0
    for start in range(0, n, size):
        end = min(start + size, n)
        if end - start < min_len:
            logger.debug(
                "Skipping segment %d [%d, %d): %d samples < %d",
                k, start, end, end - start, min_len,
            )
        else:
            yield Segment(index=k, start=start, end=end, signal=signal)
        k += 1
