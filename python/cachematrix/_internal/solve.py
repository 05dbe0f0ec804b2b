from __future__ import annotations

import contextlib
import logging
import warnings
from typing import Any, Callable

import numpy as np

from .cached_matrix import CachedMatrix
from .coercion import as_array
from .runtime import runtime
from .warnings import CacheMatrixParameterWarning

logger = logging.getLogger(__name__)

InversionError = np.linalg.LinAlgError

CACHE_HIT_MESSAGE = "getting cached data"


def _check_condition(a: np.ndarray, tol: float) -> None:
    if a.ndim != 2 or a.shape[0] != a.shape[1] or a.size == 0:
        # Shape errors are reported by numpy.linalg itself.
        return
    s = np.linalg.svd(a, compute_uv=False)
    rcond = 0.0 if s[0] == 0 else float(s[-1] / s[0])
    if rcond < tol:
        raise InversionError(
            f"system is computationally singular: reciprocal condition number = {rcond:g}"
        )


def solve(matrix: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Solve ``matrix @ x = b``, or invert ``matrix`` when ``b`` is omitted.

    ``tol`` rejects ill-conditioned input: when the reciprocal condition
    number of ``matrix`` is below it, ``InversionError`` is raised instead of
    returning a numerically meaningless result.

    Raises ``numpy.linalg.LinAlgError`` for singular or non-square input.
    """

    a = as_array(matrix)
    if tol is not None:
        _check_condition(a, float(tol))
    if b is None:
        return np.linalg.inv(a)
    return np.linalg.solve(a, as_array(b))


def _same_value(x: Any, y: Any) -> bool:
    if x is y:
        return True
    try:
        if isinstance(x, np.ndarray) or isinstance(y, np.ndarray):
            return bool(np.array_equal(np.asarray(x), np.asarray(y)))
        return bool(x == y)
    except (TypeError, ValueError):
        # Ragged or ambiguous comparisons count as different.
        return False


def _same_params(
    recorded: tuple[tuple[Any, ...], dict[str, Any]],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> bool:
    rec_args, rec_kwargs = recorded
    if len(rec_args) != len(args) or set(rec_kwargs) != set(kwargs):
        return False
    if not all(_same_value(x, y) for x, y in zip(rec_args, args)):
        return False
    return all(_same_value(rec_kwargs[k], kwargs[k]) for k in kwargs)


def compute_or_fetch_inverse(
    cached: Any,
    *args: Any,
    invert: Callable[..., Any] | None = None,
    **kwargs: Any,
) -> Any:
    """Return the cached inverse of ``cached``, computing and storing it on a miss.

    ``cached`` is a :class:`CachedMatrix` or any holder exposing ``get``,
    ``get_inverse`` and ``set_inverse``. ``lock``, ``version`` and
    ``inverse_params`` are used when the holder provides them.

    On a hit a "getting cached data" record is logged and the stored value is
    returned without calling the routine. On a miss ``invert(matrix, *args,
    **kwargs)`` is called (default :func:`solve`) and its result is cached,
    unless the matrix was replaced while the routine ran.
    Errors raised by the routine propagate unchanged and leave the cache empty.
    """

    routine = solve if invert is None else invert
    lock = getattr(cached, "lock", None)

    with lock if lock is not None else contextlib.nullcontext():
        inv = cached.get_inverse()
        if inv is not None:
            logger.log(runtime.log_level(), CACHE_HIT_MESSAGE)
            recorded = getattr(cached, "inverse_params", None)
            if (
                recorded is not None
                and runtime.warn_on_param_mismatch()
                and not _same_params(recorded, args, kwargs)
            ):
                warnings.warn(
                    "Returning a cached inverse that was computed with different solve "
                    "parameters; call set() to force recomputation.",
                    CacheMatrixParameterWarning,
                    stacklevel=2,
                )
            return inv

        version = getattr(cached, "version", None)
        matrix = cached.get()
        inv = routine(matrix, *args, **kwargs)
        if getattr(cached, "version", None) != version:
            logger.debug("matrix replaced during inversion; result not cached")
            return inv
        if isinstance(cached, CachedMatrix):
            cached.set_inverse(inv, params=(args, kwargs))
        else:
            cached.set_inverse(inv)
        return inv


cache_solve = compute_or_fetch_inverse
