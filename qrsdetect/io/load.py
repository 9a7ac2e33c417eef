# qrsdetect/io/load.py
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path

import numpy as np

from qrsdetect.core import DetectorParams, EcgSignal, detect_qrs_complexes
from qrsdetect.io.csv_reader import read_ecg_csv
from qrsdetect.io.positions import write_positions


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DetectionReport:
    """Outcome of one file-to-file detection run."""

    input_path: Path
    output_path: Path
    n_samples: int
    sampling_frequency: float | None
    positions: np.ndarray = field(repr=False)
    written: bool = False

    @property
    def n_detections(self) -> int:
        return int(self.positions.size)


def load_ecg(path: str | Path) -> EcgSignal:
    return read_ecg_csv(path)


def run_detection(
    input_path: str | Path,
    output_path: str | Path,
    params: DetectorParams | None = None,
) -> DetectionReport:
    """Read `input_path`, detect QRS complexes and write them to `output_path`.

    Nothing is written when the input holds no samples.
    """
    params = params or DetectorParams()
    input_path = Path(input_path)
    output_path = Path(output_path)

    signal = load_ecg(input_path)
    if signal.n == 0:
        logger.info("No data found in the ECG file")
        return DetectionReport(
            input_path=input_path,
            output_path=output_path,
            n_samples=0,
            sampling_frequency=None,
            positions=np.empty(0, dtype=np.float64),
        )

    fs = signal.sampling_frequency(params.default_fs)
    logger.info("Detected sampling frequency: %.2f Hz", fs)

    positions = detect_qrs_complexes(signal, params)

    logger.info("Writing to: %s", output_path)
    logger.info("Found %d QRS complexes", positions.size)
    write_positions(positions, output_path)

    return DetectionReport(
        input_path=input_path,
        output_path=output_path,
        n_samples=signal.n,
        sampling_frequency=fs,
        positions=positions,
        written=True,
    )
