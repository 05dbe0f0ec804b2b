from __future__ import annotations

import threading
from typing import Any

import numpy as np


def _default_matrix() -> np.ndarray:
    return np.empty((0, 0), dtype=np.float64)


def _shape_of(obj: Any) -> tuple[int, ...] | None:
    shape = getattr(obj, "shape", None)
    if isinstance(shape, tuple):
        return shape
    try:
        return (int(obj.rows()), int(obj.cols()))
    except (AttributeError, TypeError, ValueError):
        return None


class CachedMatrix:
    """Matrix holder that caches its inverse.

    The inverse slot is either absent (``None``) or holds whatever was last
    stored with :meth:`set_inverse`. Replacing the matrix with :meth:`set`
    always clears it, so a present inverse was stored after the latest
    ``set``. Whether it actually inverts the matrix is the caller's contract.

    The accessors are plain reads and writes. ``lock`` is provided for
    callers (e.g. :func:`compute_or_fetch_inverse`) that need the
    read-check-compute-write sequence to be atomic across threads.
    """

    def __init__(self, matrix: Any = None):
        self._matrix = _default_matrix() if matrix is None else matrix
        self._inverse: Any | None = None
        self._inverse_params: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._version = 0
        self.lock = threading.RLock()

    def set(self, matrix: Any) -> None:
        self._matrix = matrix
        self._inverse = None
        self._inverse_params = None
        self._version += 1

    def get(self) -> Any:
        return self._matrix

    def set_inverse(
        self,
        inverse: Any,
        params: tuple[tuple[Any, ...], dict[str, Any]] | None = None,
    ) -> None:
        """Store ``inverse``; ``params`` are the extra solve arguments it came from, if any."""
        self._inverse = inverse
        if params is None:
            self._inverse_params = None
        else:
            args, kwargs = params
            self._inverse_params = (tuple(args), dict(kwargs))

    def get_inverse(self) -> Any | None:
        return self._inverse

    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def version(self) -> int:
        """Number of times the matrix has been replaced."""
        return self._version

    @property
    def inverse_params(self) -> tuple[tuple[Any, ...], dict[str, Any]] | None:
        """Extra solve arguments the cached inverse was computed with, if known."""
        return self._inverse_params

    def __repr__(self) -> str:
        state = "cached" if self.has_inverse() else "absent"
        shape = _shape_of(self._matrix)
        if shape is None:
            return f"CachedMatrix(version={self._version}, inverse={state})"
        return f"CachedMatrix(shape={shape}, version={self._version}, inverse={state})"


def make_cache_matrix(matrix: Any = None) -> CachedMatrix:
    """Create a :class:`CachedMatrix` for ``matrix`` (an empty matrix by default)."""
    return CachedMatrix(matrix)
