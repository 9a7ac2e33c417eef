# test/test_load.py
import numpy as np
import pytest

from qrsdetect.core import DetectorParams
from qrsdetect.io.load import load_ecg, run_detection

from ecg_signals import impulse_train, write_csv


def test_load_ecg_round_trips_csv(tmp_path):
    sig = impulse_train(n=400)
    path = tmp_path / "ecg.csv"
    write_csv(path, sig)

    loaded = load_ecg(path)
    assert np.array_equal(loaded.time, sig.time)
    assert np.array_equal(loaded.voltage, sig.voltage)


def test_run_detection_writes_positions(tmp_path):
    src, dst = tmp_path / "ecg.csv", tmp_path / "positions.txt"
    write_csv(src, impulse_train())

    report = run_detection(src, dst)

    assert report.written
    assert report.n_samples == 6000
    assert report.sampling_frequency == pytest.approx(200.0)
    assert report.n_detections == 29
    lines = dst.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "1.000000"
    assert lines[-1] == "29.000000"


def test_run_detection_empty_input_writes_nothing(tmp_path):
    src, dst = tmp_path / "ecg.csv", tmp_path / "positions.txt"
    src.write_text("time,voltage\n", encoding="utf-8")

    report = run_detection(src, dst)

    assert not report.written
    assert report.n_samples == 0
    assert report.sampling_frequency is None
    assert report.n_detections == 0
    assert not dst.exists()


def test_run_detection_custom_params(tmp_path):
    src, dst = tmp_path / "ecg.csv", tmp_path / "positions.txt"
    write_csv(src, impulse_train(baseline_amplitude=0.0))

    report = run_detection(src, dst, DetectorParams(refractory_sec=1.5))
    assert report.n_detections == 15


def test_run_detection_is_byte_deterministic(tmp_path):
    src = tmp_path / "ecg.csv"
    write_csv(src, impulse_train(amplitude=-1.0))

    run_detection(src, tmp_path / "a.txt")
    run_detection(src, tmp_path / "b.txt")
    assert (tmp_path / "a.txt").read_bytes() == (tmp_path / "b.txt").read_bytes()
