"""Two-sample hypothesis test: observed means, permutation p-value, report."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from os import PathLike
from typing import Any, Dict, Optional, Sequence, Tuple, Union

import numpy as np

from permtest.config import PermutationConfig
from permtest.data.loader import load_observations
from permtest.errors import EmptySampleError, NonFiniteSampleError
from permtest.stats.ci import monte_carlo_ci
from permtest.stats.evidence import classify_p_value
from permtest.stats.perm import permutation_test
from permtest.stats.welford import streaming_mean

logger = logging.getLogger(__name__)

_LABEL_WIDTH = len("(mu_treatment - mu_control)")


@dataclass(frozen=True)
class HypothesisTestReport:
    mean_control: float
    n_control: int
    mean_treatment: float
    n_treatment: int
    observed_diff: float
    p_value: float
    result: str
    trials: int
    exceedances: int
    p_value_ci: Tuple[float, float]

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["p_value_ci"] = list(self.p_value_ci)
        return out


def run_hypothesis_test(
    control: Sequence[float],
    treatment: Sequence[float],
    config: Optional[PermutationConfig] = None,
) -> HypothesisTestReport:
    """
    Compare the two samples with a permutation test on mean(treatment) - mean(control).
    Both samples must be non-empty and finite; this is checked before any resampling.
    """
    control = np.asarray(control, dtype=float)
    treatment = np.asarray(treatment, dtype=float)
    if control.size == 0:
        raise EmptySampleError("control")
    if treatment.size == 0:
        raise EmptySampleError("treatment")
    if not np.isfinite(control).all():
        raise NonFiniteSampleError("control")
    if not np.isfinite(treatment).all():
        raise NonFiniteSampleError("treatment")

    mean_control = streaming_mean(control, name="control")
    mean_treatment = streaming_mean(treatment, name="treatment")
    observed_diff = mean_treatment - mean_control
    logger.info(
        "mu_control=%.6f (n=%d), mu_treatment=%.6f (n=%d), diff=%.6f",
        mean_control, control.size, mean_treatment, treatment.size, observed_diff,
    )

    perm = permutation_test(control, treatment, observed_diff, config)
    logger.info("p-value %.6f over %d permutations", perm.p_value, perm.trials)

    return HypothesisTestReport(
        mean_control=mean_control,
        n_control=int(control.size),
        mean_treatment=mean_treatment,
        n_treatment=int(treatment.size),
        observed_diff=observed_diff,
        p_value=perm.p_value,
        result=classify_p_value(perm.p_value),
        trials=perm.trials,
        exceedances=perm.exceedances,
        p_value_ci=monte_carlo_ci(perm),
    )


def run_from_files(
    control_path: Union[str, PathLike],
    treatment_path: Union[str, PathLike],
    config: Optional[PermutationConfig] = None,
) -> HypothesisTestReport:
    # both files are loaded before anything is computed
    control = load_observations(control_path)
    treatment = load_observations(treatment_path)
    return run_hypothesis_test(control, treatment, config)


def format_report(report: HypothesisTestReport) -> str:
    lo, hi = report.p_value_ci
    rows = [
        ("mu_control", report.mean_control),
        ("N_control", report.n_control),
        ("mu_treatment", report.mean_treatment),
        ("N_treatment", report.n_treatment),
        ("(mu_treatment - mu_control)", report.observed_diff),
        ("permutations", report.trials),
        ("p-value", report.p_value),
        ("p-value 95% CI", f"[{lo:.6f}, {hi:.6f}]"),
        ("result", report.result),
    ]
    return "\n".join(f"{label:>{_LABEL_WIDTH}} = {value}" for label, value in rows)
