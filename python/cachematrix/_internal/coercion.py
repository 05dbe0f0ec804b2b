from __future__ import annotations

from typing import Any

import numpy as np


def _is_matrix_like(candidate: Any) -> bool:
    return all(callable(getattr(candidate, name, None)) for name in ("rows", "cols", "get"))


def as_array(candidate: Any) -> np.ndarray:
    """Convert a matrix value into an ndarray for the linear-algebra routines.

    Shape is not checked here; numpy.linalg reports non-square input itself.
    """

    if isinstance(candidate, np.ndarray):
        return candidate

    if _is_matrix_like(candidate):
        rows = int(candidate.rows())
        cols = int(candidate.cols())
        out = np.empty((rows, cols), dtype=np.float64)
        for i in range(rows):
            for j in range(cols):
                out[i, j] = candidate.get(i, j)
        return out

    return np.asarray(candidate)
