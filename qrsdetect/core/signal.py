# qrsdetect/core/signal.py
from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from .exceptions import DetectionError, InvalidSignal


DEFAULT_SAMPLING_FREQUENCY = 200.0


@dataclass(frozen=True, slots=True)
class EcgSignal:
    """Immutable single-lead ECG: 1D time vector (seconds) + 1D voltage vector."""

    time: np.ndarray = field(repr=False)
    voltage: np.ndarray = field(repr=False)
    unit: str | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        t = np.asarray(self.time, dtype=np.float64)
        v = np.asarray(self.voltage, dtype=np.float64)

        if t.ndim != 1:
            raise InvalidSignal(f"`time` must be 1D, got shape {t.shape}")
        if v.ndim != 1:
            raise InvalidSignal(f"`voltage` must be 1D, got shape {v.shape}")
        if t.size != v.size:
            raise InvalidSignal(
                f"`time` and `voltage` must have same length, got {t.size} vs {v.size}"
            )

        if t.size > 0:
            if not np.isfinite(t).all():
                raise InvalidSignal("`time` contains non-finite values (NaN/Inf).")
            if np.any(np.diff(t) <= 0):
                raise InvalidSignal("`time` must be strictly increasing.")

        object.__setattr__(self, "time", t)
        object.__setattr__(self, "voltage", v)

    @classmethod
    def empty(cls, *, source: str | None = None) -> "EcgSignal":
        return cls(time=np.empty(0), voltage=np.empty(0), source=source)

    def __len__(self) -> int:
        return self.n

    @property
    def n(self) -> int:
        return int(self.time.size)

    @property
    def t_start(self) -> float | None:
        return None if self.n == 0 else float(self.time[0])

    @property
    def t_end(self) -> float | None:
        return None if self.n == 0 else float(self.time[-1])

    def sampling_frequency(self, default: float = DEFAULT_SAMPLING_FREQUENCY) -> float:
        """
        Sampling frequency inferred from the first two timestamps.

        The series is assumed uniform; later intervals are not inspected.
        Fewer than two samples yields `default`.
        """
        if self.n < 2:
            return float(default)
        fs = 1.0 / float(self.time[1] - self.time[0])
        if not math.isfinite(fs) or fs <= 0:
            raise DetectionError(f"Cannot derive a sampling frequency (got {fs!r}).")
        return fs

    def slice(self, start: int, end: int) -> "EcgSignal":
        """Samples [start, end) as a new signal sharing memory with this one."""
        return EcgSignal(
            time=self.time[start:end],
            voltage=self.voltage[start:end],
            unit=self.unit,
            source=self.source,
        )

    def with_voltage(self, voltage: np.ndarray) -> "EcgSignal":
        return EcgSignal(time=self.time, voltage=voltage, unit=self.unit, source=self.source)

    def mean(self) -> float | None:
        if self.n == 0:
            return None
        return float(np.mean(self.voltage))

    def std(self) -> float | None:
        # population standard deviation (ddof=0)
        if self.n == 0:
            return None
        return float(np.std(self.voltage))

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time.copy(), self.voltage.copy()
        return self.time, self.voltage


def estimate_sampling_frequency(
    signal: EcgSignal, default: float = DEFAULT_SAMPLING_FREQUENCY
) -> float:
    return signal.sampling_frequency(default)
