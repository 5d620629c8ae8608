import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import chain
from typing import Optional, Sequence, Tuple

import numpy as np

from permtest.config import PermutationConfig
from permtest.errors import EmptySampleError, NonFiniteSampleError
from permtest.stats.labels import Group, LabelAssignment

logger = logging.getLogger(__name__)

# trials shuffled together per step inside one worker
_BLOCK_ROWS = 1_000


@dataclass(frozen=True)
class PermutationResult:
    observed_diff: float
    exceedances: int
    trials: int
    raw_p: float
    p_value: float

    @property
    def tail(self) -> str:
        return "lower" if self.observed_diff < 0 else "upper"


def _partition_means(values, labels: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Single fused pass over the pooled values, keeping a Welford running mean
    for the CONTROL- and TREATMENT-labelled positions of every label row.
    """
    rows = labels.shape[0]
    mu_c = np.zeros(rows)
    mu_t = np.zeros(rows)
    n_c = np.zeros(rows)
    n_t = np.zeros(rows)
    for i, x in enumerate(values):
        is_c = labels[:, i] == Group.CONTROL
        is_t = ~is_c
        n_c += is_c
        n_t += is_t
        mu_c += np.where(is_c, (x - mu_c) / np.maximum(n_c, 1.0), 0.0)
        mu_t += np.where(is_t, (x - mu_t) / np.maximum(n_t, 1.0), 0.0)
    return mu_c, mu_t


def _count_exceedances(
    control: np.ndarray,
    treatment: np.ndarray,
    observed_diff: float,
    trials: int,
    rng: np.random.Generator,
) -> int:
    """One worker: reshuffle a private label block and count diffs above observed_diff."""
    assignment = LabelAssignment(control.size, treatment.size, rows=min(trials, _BLOCK_ROWS))
    count = 0
    remaining = trials
    while remaining > 0:
        labels = assignment.shuffle(rng)
        mu_c, mu_t = _partition_means(chain(control, treatment), labels)
        take = min(remaining, assignment.rows)
        count += int(np.count_nonzero((mu_t[:take] - mu_c[:take]) > observed_diff))
        remaining -= take
    return count


def permutation_test(
    control: Sequence[float],
    treatment: Sequence[float],
    observed_diff: float,
    config: Optional[PermutationConfig] = None,
) -> PermutationResult:
    """
    Monte-Carlo permutation test for the difference in means (treatment - control).

    Runs config.workers independent tasks of config.trials_per_worker
    relabelings each on a thread pool, sums the per-task counts of
    permuted differences strictly greater than observed_diff, and divides
    by the total trial count. When observed_diff < 0 the lower tail is
    reported instead (p = 1 - raw_p); this is a one-sided test whose tail
    follows the sign of the observed effect, not a two-sided test.

    The samples are shared read-only by all workers; each worker owns its
    label block and generator.
    """
    config = config or PermutationConfig()
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
    observed_diff = float(observed_diff)
    if not np.isfinite(observed_diff):
        raise NonFiniteSampleError("observed difference")

    logger.info(
        "Running %d permutations (%d workers x %d) on %d control / %d treatment values",
        config.total_trials, config.workers, config.trials_per_worker,
        control.size, treatment.size,
    )
    with ThreadPoolExecutor(max_workers=config.thread_count()) as pool:
        futures = [
            pool.submit(
                _count_exceedances, control, treatment, observed_diff,
                int(config.trials_per_worker), rng,
            )
            for rng in config.worker_rngs()
        ]
        count = sum(f.result() for f in futures)

    trials = config.total_trials
    raw_p = count / trials
    p = 1.0 - raw_p if observed_diff < 0 else raw_p
    logger.debug("Exceedances %d / %d (raw p %.6f)", count, trials, raw_p)
    return PermutationResult(
        observed_diff=observed_diff,
        exceedances=int(count),
        trials=int(trials),
        raw_p=float(raw_p),
        p_value=float(p),
    )


def estimate_p_value(
    control: Sequence[float],
    treatment: Sequence[float],
    observed_diff: float,
    config: Optional[PermutationConfig] = None,
) -> float:
    return permutation_test(control, treatment, observed_diff, config).p_value
