# test/test_positions.py
import re

import numpy as np
import pytest

from qrsdetect.core import OutputFailure
from qrsdetect.io.positions import format_positions, write_positions


LINE_RE = re.compile(r"-?[0-9]+\.[0-9]{6}\n")


def test_format_six_decimals_and_trailing_newline():
    text = format_positions([1.0, 2.5, 12.3456789])
    assert text == "1.000000\n2.500000\n12.345679\n"


def test_format_lines_match_pattern():
    text = format_positions(np.array([0.005, 31.0, -0.25, 1234.5]))
    lines = text.splitlines(keepends=True)
    assert len(lines) == 4
    assert all(LINE_RE.fullmatch(line) for line in lines)


def test_format_empty():
    assert format_positions([]) == ""


def test_write_positions(tmp_path):
    path = tmp_path / "positions.txt"
    out = write_positions(np.array([1.0, 2.0]), path)

    assert out == path
    assert path.read_bytes() == b"1.000000\n2.000000\n"


def test_write_positions_overwrites(tmp_path):
    path = tmp_path / "positions.txt"
    path.write_text("stale\n" * 10, encoding="utf-8")
    write_positions([3.0], path)
    assert path.read_text(encoding="utf-8") == "3.000000\n"


def test_write_positions_failure(tmp_path):
    with pytest.raises(OutputFailure):
        write_positions([1.0], tmp_path / "missing" / "positions.txt")
