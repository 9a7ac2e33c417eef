# qrsdetect/core/params.py
from __future__ import annotations

from dataclasses import dataclass, fields
import math

from .exceptions import InvalidParams


@dataclass(frozen=True, slots=True)
class DetectorParams:
    """
    Tunable constants of the QRS detector, in seconds unless noted.

    Defaults reproduce the reference behaviour:
    - 30 s segments, tails shorter than 2 s are dropped
    - 150 ms extremum neighbourhood, threshold = 2 x sigma
    - 500 ms refractory distance, 80 ms refinement window
    - 200 ms minimum gap between reported complexes
    """
    default_fs: float = 200.0
    segment_sec: float = 30.0
    min_segment_sec: float = 2.0
    neighborhood_sec: float = 0.15
    threshold_factor: float = 2.0
    refractory_sec: float = 0.5
    refine_sec: float = 0.08
    min_gap_sec: float = 0.2

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParams(f"DetectorParams.{f.name} must be a number.")
            if not math.isfinite(value) or value <= 0:
                raise InvalidParams(
                    f"DetectorParams.{f.name} must be finite and > 0, got {value!r}."
                )
            object.__setattr__(self, f.name, float(value))

        if self.min_segment_sec > self.segment_sec:
            raise InvalidParams("min_segment_sec cannot exceed segment_sec.")

    @staticmethod
    def samples(seconds: float, fs: float) -> int:
        """Convert a duration to a whole number of samples (truncating)."""
        return int(seconds * fs)

    # Derived sample counts
    def segment_size(self, fs: float) -> int:
        return self.samples(self.segment_sec, fs)

    def min_segment_size(self, fs: float) -> int:
        return self.samples(self.min_segment_sec, fs)

    def neighborhood(self, fs: float) -> int:
        return self.samples(self.neighborhood_sec, fs)

    def refractory(self, fs: float) -> int:
        return self.samples(self.refractory_sec, fs)

    def refine_window(self, fs: float) -> int:
        return self.samples(self.refine_sec, fs)

    def replace(self, **changes: float) -> "DetectorParams":
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        unknown = set(changes) - set(values)
        if unknown:
            raise InvalidParams(f"Unknown DetectorParams field(s): {sorted(unknown)}")
        values.update(changes)
        return DetectorParams(**values)
