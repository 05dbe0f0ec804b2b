"""Matrix container that memoizes its inverse."""
from __future__ import annotations

import logging as _logging
from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
from importlib.metadata import version as _dist_version

try:
    __version__ = _dist_version("cachematrix")
except _PackageNotFoundError:
    __version__ = "unknown"

from ._internal.cached_matrix import CachedMatrix, make_cache_matrix
from ._internal.runtime import runtime as _runtime
from ._internal.solve import (
    CACHE_HIT_MESSAGE,
    InversionError,
    cache_solve,
    compute_or_fetch_inverse,
    solve,
)
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixParameterWarning,
)

# Library logging stays silent unless the application configures handlers.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())


def reload_settings() -> None:
    """Re-read CACHEMATRIX_* environment settings on next use."""
    _runtime.reset()


__all__ = [
    "CachedMatrix",
    "make_cache_matrix",
    "compute_or_fetch_inverse",
    "cache_solve",
    "solve",
    "InversionError",
    "CACHE_HIT_MESSAGE",
    "CacheMatrixWarning",
    "CacheMatrixParameterWarning",
    "reload_settings",
]
