# qrsdetect/io/positions.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from qrsdetect.core import OutputFailure


def format_positions(times: Iterable[float]) -> str:
    """One timestamp per line, six fractional digits, trailing newline."""
    return "".join(f"{float(t):.6f}\n" for t in times)


def write_positions(times: Iterable[float], path: str | Path) -> Path:
    path = Path(path)
    text = format_positions(times)
    try:
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
    except OSError as e:
        raise OutputFailure(f"Cannot write positions to '{path}': {e}") from e
    return path
