from permtest.stats.ci import monte_carlo_ci, wilson_ci
from permtest.stats.perm import PermutationResult


def test_wilson_ci_bounds():
    lo, hi = wilson_ci(139, 1000)
    assert 0.0 <= lo < 0.139 < hi <= 1.0


def test_monte_carlo_ci_upper_tail_contains_estimate():
    res = PermutationResult(observed_diff=1.0, exceedances=139, trials=1000, raw_p=0.139, p_value=0.139)
    lo, hi = monte_carlo_ci(res)
    assert lo < res.p_value < hi


def test_monte_carlo_ci_mirrored_for_lower_tail():
    res = PermutationResult(observed_diff=-1.0, exceedances=861, trials=1000, raw_p=0.861, p_value=0.139)
    lo, hi = monte_carlo_ci(res)
    raw_lo, raw_hi = wilson_ci(861, 1000)
    assert (lo, hi) == (1.0 - raw_hi, 1.0 - raw_lo)
    assert lo < res.p_value < hi
