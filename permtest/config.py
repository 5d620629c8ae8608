from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from permtest.errors import ConfigurationError

# Legacy trial budget: 1000 tasks x 1000 permutations
DEFAULT_WORKERS = 1_000
DEFAULT_TRIALS_PER_WORKER = 1_000


@dataclass(frozen=True)
class PermutationConfig:
    """
    Run settings for the permutation engine.
      - workers: number of independent trial tasks (handed to a thread pool)
      - trials_per_worker: permutations run by each task
      - seed: run-level seed; None draws from system entropy
      - max_threads: pool size, defaults to min(workers, cpu count)
    """

    workers: int = DEFAULT_WORKERS
    trials_per_worker: int = DEFAULT_TRIALS_PER_WORKER
    seed: Optional[int] = None
    max_threads: Optional[int] = None

    def __post_init__(self) -> None:
        if int(self.workers) < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")
        if int(self.trials_per_worker) < 1:
            raise ConfigurationError(
                f"trials_per_worker must be >= 1, got {self.trials_per_worker}"
            )
        if self.max_threads is not None and int(self.max_threads) < 1:
            raise ConfigurationError(f"max_threads must be >= 1, got {self.max_threads}")
        if self.seed is not None and int(self.seed) < 0:
            raise ConfigurationError(f"seed must be non-negative, got {self.seed}")

    @property
    def total_trials(self) -> int:
        return int(self.workers) * int(self.trials_per_worker)

    def thread_count(self) -> int:
        if self.max_threads is not None:
            return min(int(self.max_threads), int(self.workers))
        return max(1, min(int(self.workers), os.cpu_count() or 1))

    def worker_rngs(self) -> List[np.random.Generator]:
        """One independent generator per worker, derived from the run-level seed."""
        children = np.random.SeedSequence(self.seed).spawn(int(self.workers))
        return [np.random.default_rng(s) for s in children]
