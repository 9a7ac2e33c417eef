# qrsdetect/io/edf_reader.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import numpy as np
import pyedflib

from qrsdetect.core import InputMalformed, InputMissing


@dataclass(frozen=True, slots=True)
class EdfSignalInfo:
    """Header fields + a short data preview for one EDF signal."""

    index: int
    label: str
    unit: str
    sample_frequency: float
    n_samples: int
    physical_min: float
    physical_max: float
    preview: np.ndarray = field(repr=False)


@dataclass(frozen=True, slots=True)
class EdfSummary:
    path: str
    start: datetime | None
    duration: float
    signals: list[EdfSignalInfo] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [s.label for s in self.signals]


def read_edf_summary(path: str | Path, *, preview: int = 5) -> EdfSummary:
    """
    Read the header of an EDF/BDF file plus the first `preview` samples of
    every signal.
    """
    path = Path(path)
    if not path.is_file():
        raise InputMissing(f"EDF file not found: '{path}'")

    try:
        f = pyedflib.EdfReader(str(path))
    except OSError as e:
        raise InputMalformed(f"Cannot read EDF file '{path}': {e}") from e

    try:
        n_samples = f.getNSamples()
        signals = []
        for ch in range(f.signals_in_file):
            n_read = int(min(preview, n_samples[ch]))
            data = f.readSignal(ch, 0, n_read) if n_read > 0 else np.empty(0)
            signals.append(
                EdfSignalInfo(
                    index=ch,
                    label=f.getLabel(ch).strip(),
                    unit=f.getPhysicalDimension(ch).strip(),
                    sample_frequency=float(f.getSampleFrequency(ch)),
                    n_samples=int(n_samples[ch]),
                    physical_min=float(f.getPhysicalMinimum(ch)),
                    physical_max=float(f.getPhysicalMaximum(ch)),
                    preview=np.asarray(data, dtype=np.float64),
                )
            )
        return EdfSummary(
            path=str(path),
            start=f.getStartdatetime(),
            duration=float(f.getFileDuration()),
            signals=signals,
        )
    finally:
        f.close()


def format_edf_summary(summary: EdfSummary) -> str:
    lines = [
        f"EDF file: {summary.path}",
        f"Start datetime: {summary.start}",
        f"Duration: {summary.duration:.3f} s",
        f"Signals: {len(summary.signals)}",
    ]
    for s in summary.signals:
        lines.append(
            f"  [{s.index}] {s.label} ({s.unit or '-'}): {s.sample_frequency:g} Hz, "
            f"{s.n_samples} samples, range [{s.physical_min:g}, {s.physical_max:g}]"
        )
    lines.append("##data")
    for s in summary.signals:
        values = ", ".join(f"{x:g}" for x in s.preview)
        lines.append(f"  {s.label}: [{values}]")
    return "\n".join(lines)
