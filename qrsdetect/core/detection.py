# qrsdetect/core/detection.py
"""
Threshold-based QRS detection.

Pipeline, per 30 s segment:
1. subtract the segment mean
2. keep local extrema (either polarity) that dominate a +/-150 ms
   neighbourhood and exceed 2 sigma
3. greedy non-maximum suppression with a 500 ms refractory distance
4. move each survivor to the max-|voltage| sample of the raw signal

Segment outputs are merged, sorted and thinned to a 200 ms minimum gap.
"""
from __future__ import annotations

from bisect import bisect_left, insort
from dataclasses import dataclass, field
import logging
from typing import Callable, Iterable, NamedTuple, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .params import DetectorParams
from .segment import Segment, iter_segments
from .signal import EcgSignal


logger = logging.getLogger(__name__)


class Candidate(NamedTuple):
    index: int          # sample index inside the segment
    amplitude: float    # |normalized voltage|


def normalize(voltage: np.ndarray) -> np.ndarray:
    """Return `voltage` minus its mean, as a new float64 array."""
    v = np.asarray(voltage, dtype=np.float64)
    if v.size == 0:
        return v.copy()
    return v - v.mean()


def _sliding_extreme(
    v: np.ndarray,
    width: int,
    reducer: Callable[..., np.ndarray],
    fill: float,
) -> np.ndarray:
    """out[k] = reducer(v[k:k+width]); a zero-width window yields `fill`."""
    if width <= 0:
        return np.full(v.size + 1, fill)
    return reducer(sliding_window_view(v, width), axis=1)


def find_candidates(
    v: np.ndarray,
    fs: float,
    params: DetectorParams | None = None,
) -> list[Candidate]:
    """
    Local extrema of the normalized segment `v` above the adaptive threshold.

    Index i in [W, L-W) qualifies when it is above zero and at least as large
    as every sample of v[i-W:i] and v[i+1:i+W] (or the mirrored condition
    below zero), and |v[i]| > threshold_factor * std(v).
    """
    params = params or DetectorParams()
    v = np.asarray(v, dtype=np.float64)
    n = v.size
    w = params.neighborhood(fs)
    if n - w <= w:
        return []

    threshold = params.threshold_factor * float(np.std(v))
    idx = np.arange(w, n - w)
    center = v[idx]

    # left window has w samples, right window has w-1
    left_max = _sliding_extreme(v, w, np.max, -np.inf)[idx - w]
    left_min = _sliding_extreme(v, w, np.min, np.inf)[idx - w]
    right_max = _sliding_extreme(v, w - 1, np.max, -np.inf)[idx + 1]
    right_min = _sliding_extreme(v, w - 1, np.min, np.inf)[idx + 1]

    strong = np.abs(center) > threshold
    positive = (center > 0) & (center >= left_max) & (center >= right_max) & strong
    negative = (center < 0) & (center <= left_min) & (center <= right_min) & strong

    hits = idx[positive | negative]
    return [Candidate(int(i), float(abs(v[i]))) for i in hits]


def select_peaks(
    candidates: Iterable[Candidate],
    fs: float,
    params: DetectorParams | None = None,
) -> list[int]:
    """
    Greedy non-maximum suppression.

    Candidates are visited by decreasing amplitude (ties keep input order);
    one is accepted only if it lies more than the refractory distance from
    every candidate accepted before it. Returns indices in ascending order.
    """
    params = params or DetectorParams()
    distance = params.refractory(fs)
    ranked = sorted(candidates, key=lambda c: c.amplitude, reverse=True)

    selected: list[int] = []
    for cand in ranked:
        i = cand.index
        pos = bisect_left(selected, i)
        if pos > 0 and i - selected[pos - 1] <= distance:
            continue
        if pos < len(selected) and selected[pos] - i <= distance:
            continue
        insort(selected, i)
    return selected


def refine_peaks(
    indices: Sequence[int],
    segment: Segment | EcgSignal,
    fs: float,
    params: DetectorParams | None = None,
) -> np.ndarray:
    """
    Timestamps of the max-|voltage| raw sample within +/-refine_sec of each index.

    Reads the original (not mean-subtracted) voltage. The first sample wins
    on ties. Windows that collapse to nothing are skipped.
    """
    params = params or DetectorParams()
    radius = params.refine_window(fs)
    time = segment.time
    magnitude = np.abs(segment.voltage)
    n = magnitude.size

    out: list[float] = []
    for i in indices:
        start = max(0, i - radius)
        end = min(n, i + radius)
        if start >= end:
            continue
        k = start + int(np.argmax(magnitude[start:end]))
        out.append(float(time[k]))
    return np.asarray(out, dtype=np.float64)


def deduplicate(times: Iterable[float], params: DetectorParams | None = None) -> np.ndarray:
    """Sort ascending and drop any timestamp closer than min_gap_sec to the last kept one."""
    params = params or DetectorParams()
    ordered = np.sort(np.fromiter(times, dtype=np.float64), kind="stable")

    kept: list[float] = []
    for t in ordered:
        if not kept or t - kept[-1] >= params.min_gap_sec:
            kept.append(float(t))
    return np.asarray(kept, dtype=np.float64)


def detect_segment(
    segment: Segment,
    fs: float,
    params: DetectorParams | None = None,
) -> np.ndarray:
    params = params or DetectorParams()
    v = normalize(segment.voltage)
    candidates = find_candidates(v, fs, params)
    selected = select_peaks(candidates, fs, params)
    logger.debug(
        "Segment %d [%.3f s, %.3f s]: %d candidates, %d selected",
        segment.index, segment.t_start, segment.t_end, len(candidates), len(selected),
    )
    return refine_peaks(selected, segment, fs, params)


def detect_qrs_complexes(
    signal: EcgSignal,
    params: DetectorParams | None = None,
) -> np.ndarray:
    """
    Detect QRS complexes in `signal` and return their timestamps (seconds).

    The result is strictly increasing, every value is one of `signal.time`,
    and consecutive values are at least `params.min_gap_sec` apart.
    """
    params = params or DetectorParams()
    if signal.n == 0:
        return np.empty(0, dtype=np.float64)

    fs = signal.sampling_frequency(params.default_fs)
    logger.debug("Sampling frequency: %.2f Hz", fs)

    per_segment = [detect_segment(seg, fs, params) for seg in iter_segments(signal, fs, params)]
    if not per_segment:
        return np.empty(0, dtype=np.float64)

    positions = deduplicate(np.concatenate(per_segment), params)
    logger.debug("Detected %d QRS complexes", positions.size)
    return positions


@dataclass(frozen=True, slots=True)
class QrsDetector:
    """Reusable detector bound to one DetectorParams."""

    params: DetectorParams = field(default_factory=DetectorParams)

    def sampling_frequency(self, signal: EcgSignal) -> float:
        return signal.sampling_frequency(self.params.default_fs)

    def segments(self, signal: EcgSignal) -> list[Segment]:
        if signal.n == 0:
            return []
        return list(iter_segments(signal, self.sampling_frequency(signal), self.params))

    def detect(self, signal: EcgSignal) -> np.ndarray:
        return detect_qrs_complexes(signal, self.params)

    __call__ = detect
