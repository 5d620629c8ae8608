import numpy as np
import pytest

from permtest.errors import EmptySampleError
from permtest.stats.welford import streaming_mean

CONTROL = [52, 104, 146, 10, 51, 30, 40, 27, 46]
TREATMENT = [94, 197, 16, 38, 99, 141, 23]


def test_mouse_means():
    assert streaming_mean(CONTROL) == pytest.approx(56.22222222222222, abs=1e-6)
    assert streaming_mean(TREATMENT) == pytest.approx(86.85714285714286, abs=1e-6)


def test_matches_naive_mean_on_large_mixed_scale_input():
    rng = np.random.default_rng(0)
    x = rng.normal(size=100_000) * 10.0 ** rng.integers(-3, 4, size=100_000)
    assert streaming_mean(x) == pytest.approx(float(np.sum(x) / x.size), abs=1e-6)


def test_accepts_lazy_filtered_view():
    values = [1.0, -5.0, 3.0, -2.0, 8.0]
    assert streaming_mean(v for v in values if v > 0) == pytest.approx(4.0)


def test_empty_input_rejected():
    with pytest.raises(EmptySampleError) as exc:
        streaming_mean(iter([]), name="treatment")
    assert exc.value.name == "treatment"
