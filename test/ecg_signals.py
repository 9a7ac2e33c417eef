"""
Synthetic ECG-like signals for detector tests.

All generators are deterministic and sample uniformly, so the time of
sample k is exactly k / fs.
"""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from qrsdetect.core import EcgSignal


def sample_times(n: int, fs: float = 200.0) -> np.ndarray:
    return np.arange(n, dtype=np.float64) / fs


def sine(n: int, amplitude: float, freq_hz: float, fs: float = 200.0) -> np.ndarray:
    k = np.arange(n, dtype=np.float64)
    return amplitude * np.sin(2.0 * math.pi * freq_hz * k / fs)


def add_impulses(v: np.ndarray, indices: Iterable[int], amplitude: float = 1.0) -> np.ndarray:
    out = np.array(v, dtype=np.float64, copy=True)
    for k in indices:
        out[k] += amplitude
    return out


def make_signal(voltage, fs: float = 200.0) -> EcgSignal:
    voltage = np.asarray(voltage, dtype=np.float64)
    return EcgSignal(time=sample_times(voltage.size, fs), voltage=voltage)


def impulse_train(
    n: int = 6000,
    fs: float = 200.0,
    *,
    every: int = 200,
    amplitude: float = 1.0,
    baseline_amplitude: float = 0.1,
    baseline_hz: float = 0.5,
) -> EcgSignal:
    """Slow sinusoid with a unit impulse every `every` samples (from `every` on)."""
    v = sine(n, baseline_amplitude, baseline_hz, fs)
    v = add_impulses(v, range(every, n, every), amplitude)
    return make_signal(v, fs)


def write_csv(path, signal: EcgSignal, header: str = "time,voltage") -> None:
    lines = [header]
    lines += [f"{t!r},{v!r}" for t, v in zip(signal.time.tolist(), signal.voltage.tolist())]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
