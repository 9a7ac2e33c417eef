# test/test_exceptions.py
import pytest

from qrsdetect.core import (
    CoreError,
    InvalidSignal,
    InvalidSegment,
    InvalidParams,
    DetectionError,
    InputMissing,
    InputMalformed,
    OutputFailure,
)


def test_exception_inheritance_validation():
    assert issubclass(InvalidSignal, CoreError)
    assert issubclass(InvalidSegment, CoreError)
    assert issubclass(InvalidParams, CoreError)
    assert issubclass(DetectionError, CoreError)


def test_io_errors_are_builtin_compatible():
    assert issubclass(InputMissing, CoreError)
    assert issubclass(InputMissing, FileNotFoundError)
    assert issubclass(InputMalformed, CoreError)
    assert issubclass(InputMalformed, ValueError)
    assert issubclass(OutputFailure, CoreError)
    assert issubclass(OutputFailure, OSError)


def test_io_errors_can_be_caught_as_builtins():
    with pytest.raises(FileNotFoundError):
        raise InputMissing("ecg.csv")

    with pytest.raises(ValueError):
        raise InputMalformed("line 3")

    with pytest.raises(OSError):
        raise OutputFailure("positions.txt")
