# qrsdetect/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all qrsdetect exceptions."""


# ---- Validation / construction errors ----
class InvalidSignal(CoreError):
    """Raised when an EcgSignal is constructed with invalid inputs."""


class InvalidSegment(CoreError):
    """Raised when a Segment is constructed with out-of-range bounds."""


class InvalidParams(CoreError):
    """Raised when DetectorParams holds an unusable value."""


class DetectionError(CoreError):
    """Raised on arithmetic conditions that well-formed input never reaches."""


# ---- I/O errors (also behave like their builtin counterparts) ----
class InputMissing(CoreError, FileNotFoundError):
    """Raised when the input file cannot be opened."""


class InputMalformed(CoreError, ValueError):
    """Raised when a retained input row cannot be parsed."""


class OutputFailure(CoreError, OSError):
    """Raised when the output file cannot be created or written."""
