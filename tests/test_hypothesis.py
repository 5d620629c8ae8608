import pytest

import permtest.hypothesis as hypothesis
from permtest.config import PermutationConfig
from permtest.errors import (
    EmptySampleError,
    NonFiniteSampleError,
    ObservationFormatError,
    ObservationIOError,
)
from permtest.hypothesis import format_report, run_from_files, run_hypothesis_test

CONTROL = [52, 104, 146, 10, 51, 30, 40, 27, 46]
TREATMENT = [94, 197, 16, 38, 99, 141, 23]


def _write(path, values):
    path.write_text("".join(f"{v}\n" for v in values))
    return path


def test_mouse_report(tmp_path):
    c = _write(tmp_path / "control.dat", CONTROL)
    t = _write(tmp_path / "treatment.dat", TREATMENT)
    rep = run_from_files(c, t, PermutationConfig(workers=50, trials_per_worker=1000, seed=3))
    assert rep.n_control == 9 and rep.n_treatment == 7
    assert rep.mean_control == pytest.approx(56.222222, abs=1e-6)
    assert rep.mean_treatment == pytest.approx(86.857143, abs=1e-6)
    assert rep.observed_diff == pytest.approx(30.634921, abs=1e-6)
    assert rep.p_value == pytest.approx(0.139, abs=0.015)
    assert rep.result == "no evidence against null hypothesis"
    lo, hi = rep.p_value_ci
    assert lo <= rep.p_value <= hi


def test_seeded_driver_is_idempotent(tmp_path):
    c = _write(tmp_path / "control.dat", CONTROL)
    t = _write(tmp_path / "treatment.dat", TREATMENT)
    cfg = PermutationConfig(workers=10, trials_per_worker=200, seed=42)
    assert format_report(run_from_files(c, t, cfg)) == format_report(run_from_files(c, t, cfg))


def test_format_report_lines():
    rep = run_hypothesis_test(CONTROL, TREATMENT, PermutationConfig(workers=4, trials_per_worker=100, seed=0))
    text = format_report(rep)
    assert "                 mu_control = 56.2222222222222" in text
    assert "                  N_control = 9" in text
    assert "(mu_treatment - mu_control) = " in text
    assert "                     result = " in text
    assert set(rep.as_dict()) >= {"mean_control", "n_control", "mean_treatment",
                                  "n_treatment", "observed_diff", "p_value", "result"}


def test_empty_sample_checked_before_engine(monkeypatch, tmp_path):
    def boom(*a, **kw):
        raise AssertionError("engine must not run")

    monkeypatch.setattr(hypothesis, "permutation_test", boom)
    c = _write(tmp_path / "control.dat", CONTROL)
    t = tmp_path / "treatment.dat"
    t.write_text("")
    with pytest.raises(EmptySampleError) as exc:
        run_from_files(c, t)
    assert exc.value.name == "treatment"


def test_io_and_format_errors_propagate(tmp_path):
    c = _write(tmp_path / "control.dat", CONTROL)
    bad = tmp_path / "bad.dat"
    bad.write_text("1\nx\n")
    with pytest.raises(ObservationFormatError):
        run_from_files(c, bad)
    with pytest.raises(ObservationIOError):
        run_from_files(tmp_path / "missing.dat", c)


def test_nan_observation_rejected_before_engine(monkeypatch):
    def boom(*a, **kw):
        raise AssertionError("engine must not run")

    monkeypatch.setattr(hypothesis, "permutation_test", boom)
    with pytest.raises(NonFiniteSampleError) as exc:
        run_hypothesis_test([1.0, 2.0, float("nan")], [1.5, 2.5],
                            PermutationConfig(workers=4, trials_per_worker=100, seed=0))
    assert exc.value.name == "control"
