from typing import Iterable

from permtest.errors import EmptySampleError


def streaming_mean(values: Iterable[float], name: str = "sample") -> float:
    """
    Arithmetic mean via Welford's online update: mu <- mu + (x - mu) / n.
    Accepts any iterable (lists, arrays, generators, filtered views).
    Raises EmptySampleError when nothing is consumed.
    """
    mu = 0.0
    n = 0
    for x in values:
        n += 1
        mu += (float(x) - mu) / n
    if n == 0:
        raise EmptySampleError(name)
    return mu
