# qrsdetect/io/csv_reader.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from qrsdetect.core import EcgSignal, InputMalformed, InputMissing


logger = logging.getLogger(__name__)


def parse_ecg_lines(lines: Iterable[str]) -> tuple[np.ndarray, np.ndarray]:
    """Parse `time,voltage` rows into (time, voltage) arrays.

    The first line is a header and is dropped unread. Rows that do not
    split into exactly two comma-separated fields are ignored.

    Raises
    ------
    InputMalformed
        If a two-field row does not hold two decimal numbers.
    """
    times: list[float] = []
    volts: list[float] = []

    for lineno, line in enumerate(lines, start=1):
        if lineno == 1:
            continue
        parts = line.rstrip("\r\n").split(",")
        if len(parts) != 2:
            continue
        try:
            t = float(parts[0].strip())
            v = float(parts[1].strip())
        except ValueError as e:
            raise InputMalformed(f"line {lineno}: cannot parse {line.strip()!r}") from e
        times.append(t)
        volts.append(v)

    return np.asarray(times, dtype=np.float64), np.asarray(volts, dtype=np.float64)


def read_ecg_csv(path: str | Path) -> EcgSignal:
    """Read a two-column ECG CSV into an EcgSignal."""
    path = Path(path)
    try:
        fh = path.open("r", encoding="utf-8")
    except OSError as e:
        raise InputMissing(f"Cannot open ECG input '{path}': {e}") from e

    with fh:
        try:
            t, v = parse_ecg_lines(fh)
        except UnicodeDecodeError as e:
            raise InputMalformed(f"'{path}' is not UTF-8 text: {e}") from e

    if t.size:
        logger.info("Total data points: %d", t.size)

    return EcgSignal(time=t, voltage=v, source=str(path))
