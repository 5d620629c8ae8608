import logging
from os import PathLike
from typing import Union

import numpy as np
import pandas as pd

from permtest.errors import ObservationFormatError, ObservationIOError

logger = logging.getLogger(__name__)


def load_observations(path: Union[str, PathLike]) -> np.ndarray:
    """
    Read one real number per line. Blank, non-numeric and non-finite
    lines are rejected with the 1-based line number. Returns a read-only
    float array (empty for an empty file). A leading UTF-8 BOM is ignored.
    """
    path = str(path)
    try:
        with open(path, encoding="utf-8-sig") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise ObservationIOError(path, reason) from exc

    stripped = pd.Series(lines, dtype=object).str.strip()
    # to_numeric only flags bad lines; its fast parser is not correctly rounded
    bad = pd.to_numeric(stripped, errors="coerce").isna().to_numpy()
    if bad.any():
        idx = int(np.flatnonzero(bad)[0])
        raise ObservationFormatError(path, idx + 1, lines[idx])

    try:
        values = np.asarray(stripped.tolist(), dtype=float)
    except ValueError as exc:
        idx = _first_unparseable(stripped.tolist())
        raise ObservationFormatError(path, idx + 1, lines[idx]) from exc

    bad = ~np.isfinite(values)
    if bad.any():
        idx = int(np.flatnonzero(bad)[0])
        raise ObservationFormatError(path, idx + 1, lines[idx])

    values.flags.writeable = False
    logger.debug("Loaded %d observations from %s", values.size, path)
    return values


def _first_unparseable(texts) -> int:
    for i, text in enumerate(texts):
        try:
            np.float64(text)
        except ValueError:
            return i
    return 0
