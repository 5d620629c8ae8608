from enum import IntEnum
from typing import Tuple

import numpy as np


class Group(IntEnum):
    CONTROL = 0
    TREATMENT = 1


class LabelAssignment:
    """
    Group labels over the pooled positions (control first, then treatment).

    Holds `rows` independent assignments so a worker can shuffle a whole
    block of trials at once. Each row starts as n_control CONTROL labels
    followed by n_treatment TREATMENT labels; shuffling permutes positions
    within every row and never changes how many of each label a row has.
    """

    def __init__(self, n_control: int, n_treatment: int, rows: int = 1):
        if n_control < 1 or n_treatment < 1 or rows < 1:
            raise ValueError("n_control, n_treatment and rows must all be >= 1")
        self.n_control = int(n_control)
        self.n_treatment = int(n_treatment)
        base = np.repeat(
            np.array([Group.CONTROL, Group.TREATMENT], dtype=np.int8),
            [self.n_control, self.n_treatment],
        )
        self.labels = np.tile(base, (int(rows), 1))

    def __len__(self) -> int:
        return self.n_control + self.n_treatment

    @property
    def rows(self) -> int:
        return self.labels.shape[0]

    def shuffle(self, rng: np.random.Generator) -> np.ndarray:
        # independent uniform permutation of every row, in place
        rng.permuted(self.labels, axis=1, out=self.labels)
        return self.labels

    def counts(self) -> Tuple[np.ndarray, np.ndarray]:
        """Per-row (control, treatment) label counts."""
        is_control = self.labels == Group.CONTROL
        return is_control.sum(axis=1), (~is_control).sum(axis=1)
