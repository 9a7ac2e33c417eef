# qrsdetect/core/__init__.py
"""
Core domain objects and the QRS detector.

This module defines the format-agnostic side of qrsdetect:
- EcgSignal: validated single-lead (time, voltage) series
- Segment: fixed-length window of an EcgSignal
- DetectorParams: tunable detector constants
- detect_qrs_complexes / QrsDetector: the detection pipeline

The core layer is independent from file formats and the CLI.
"""

from .signal import EcgSignal, estimate_sampling_frequency, DEFAULT_SAMPLING_FREQUENCY
from .segment import Segment, iter_segments
from .params import DetectorParams
from .detection import (
    Candidate,
    QrsDetector,
    normalize,
    find_candidates,
    select_peaks,
    refine_peaks,
    deduplicate,
    detect_segment,
    detect_qrs_complexes,
)
from .exceptions import (
    CoreError,
    InvalidSignal,
    InvalidSegment,
    InvalidParams,
    DetectionError,
    InputMissing,
    InputMalformed,
    OutputFailure,
)


__all__ = [
    # signal
    "EcgSignal",
    "estimate_sampling_frequency",
    "DEFAULT_SAMPLING_FREQUENCY",

    # segmentation
    "Segment",
    "iter_segments",

    # configuration
    "DetectorParams",

    # detection
    "Candidate",
    "QrsDetector",
    "normalize",
    "find_candidates",
    "select_peaks",
    "refine_peaks",
    "deduplicate",
    "detect_segment",
    "detect_qrs_complexes",

    # exceptions
    "CoreError",
    "InvalidSignal",
    "InvalidSegment",
    "InvalidParams",
    "DetectionError",
    "InputMissing",
    "InputMalformed",
    "OutputFailure",
]
