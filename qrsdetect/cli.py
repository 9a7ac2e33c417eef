# qrsdetect/cli.py
"""
qrsdetect command line.

Usage:
    qrsdetect                       # ./ecg.csv -> ./positions.txt
    qrsdetect --input rec.csv --output peaks.txt
    qrsdetect --edf example.edf     # also print an EDF header summary
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from qrsdetect.core import CoreError
from qrsdetect.io.edf_reader import format_edf_summary, read_edf_summary
from qrsdetect.io.load import run_detection


DEFAULT_INPUT = "ecg.csv"
DEFAULT_OUTPUT = "positions.txt"

logger = logging.getLogger("qrsdetect.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrsdetect",
        description="Detect QRS complexes in a single-lead ECG CSV.",
    )
    parser.add_argument("--input", type=Path, help=f"ECG CSV (default: ./{DEFAULT_INPUT})")
    parser.add_argument(
        "--output", type=Path, help=f"Positions file (default: ./{DEFAULT_OUTPUT})"
    )
    parser.add_argument("--edf", type=Path, help="Print a header summary of this EDF file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _attach_stdout_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger = logging.getLogger("qrsdetect")
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    handler = _attach_stdout_handler(args.verbose)
    try:
        return _run(args)
    finally:
        logging.getLogger("qrsdetect").removeHandler(handler)


def _run(args: argparse.Namespace) -> int:
    cwd = Path.cwd()
    input_path = args.input or cwd / DEFAULT_INPUT
    output_path = args.output or cwd / DEFAULT_OUTPUT

    logger.info("Current directory: %s", cwd)
    logger.info("Reading from: %s", input_path)

    try:
        report = run_detection(input_path, output_path)
        if not report.written:
            return 0
        logger.info("Detection complete.")

        if args.edf is not None:
            logger.info(format_edf_summary(read_edf_summary(args.edf)))
    except CoreError as e:
        logger.error("Error: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
