"""Exception hierarchy for permtest.

Every error inherits from ``PermtestError`` and from the builtin it
refines, so ``except ValueError`` / ``except OSError`` handlers keep
working.
"""

from __future__ import annotations


class PermtestError(Exception):
    """Base exception for all permtest errors."""


class ConfigurationError(PermtestError, ValueError):
    """Invalid run configuration."""


class ObservationIOError(PermtestError, OSError):
    """An observation file is missing or unreadable."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot read observations from {path}: {reason}")


class ObservationFormatError(PermtestError, ValueError):
    """A line in an observation file is not a finite real number."""

    def __init__(self, path: str, line_number: int, text: str) -> None:
        self.path = path
        self.line_number = line_number
        self.text = text
        super().__init__(
            f"{path}:{line_number}: expected a finite number, got {text!r}"
        )


class EmptySampleError(PermtestError, ValueError):
    """A sample has no observations, so its mean is undefined."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} sample is empty; mean is undefined")


class NonFiniteSampleError(PermtestError, ValueError):
    """A sample or the observed difference contains NaN or infinity."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} contains non-finite values (NaN or infinity)")


__all__ = [
    "PermtestError",
    "ConfigurationError",
    "ObservationIOError",
    "ObservationFormatError",
    "EmptySampleError",
    "NonFiniteSampleError",
]
