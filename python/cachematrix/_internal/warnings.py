"""Warnings issued by cachematrix.

All of them derive from ``CacheMatrixWarning``, so one filter entry covers
the package. Nothing here imports other cachematrix modules.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixParameterWarning(CacheMatrixWarning):
    """A cached inverse was served for a call with different solve parameters."""
