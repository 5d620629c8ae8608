from typing import Tuple

import numpy as np
from scipy import stats

from permtest.stats.perm import PermutationResult


def wilson_ci(successes: int, n: int, alpha: float = 0.05) -> Tuple[float, float]:
    if n == 0:
        return (0.0, 1.0)
    z = stats.norm.ppf(1 - alpha/2)
    phat = successes / n
    denom = 1 + z**2/n
    center = (phat + z**2/(2*n)) / denom
    half = z * np.sqrt((phat*(1-phat) + z**2/(4*n)) / n) / denom
    lo = max(0.0, center - half)
    hi = min(1.0, center + half)
    return float(lo), float(hi)


def monte_carlo_ci(result: PermutationResult, alpha: float = 0.05) -> Tuple[float, float]:
    """
    Wilson interval for the Monte-Carlo estimate of the p-value.
    The interval is computed on the exceedance proportion and mirrored
    when the lower tail was selected (p = 1 - raw_p).
    """
    lo, hi = wilson_ci(result.exceedances, result.trials, alpha=alpha)
    if result.tail == "lower":
        return 1.0 - hi, 1.0 - lo
    return lo, hi
