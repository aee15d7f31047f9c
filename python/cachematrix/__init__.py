"""Memoized matrix inversion.

>>> import numpy as np
>>> import cachematrix
>>> cm = cachematrix.CachedMatrix(np.array([[2.0, 0.0], [0.0, 2.0]]))
>>> cachematrix.resolve_inverse(cm)
array([[0.5, 0. ],
       [0. , 0.5]])

Calling ``resolve_inverse`` again returns the same object without
recomputing; ``cm.set_matrix(...)`` clears it.
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _dist_version

try:
    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:
    __version__ = "unknown"

from ._internal.cached_matrix import CachedMatrix, placeholder_matrix
from ._internal.config import (
    COND_WARNING_ENV,
    DEFAULT_TOL_ENV,
    Settings,
    configure,
    get_settings,
    reset_settings,
)
from ._internal.errors import InversionFailure
from ._internal.inversion import invert
from ._internal.linalg_cache import resolve_inverse
from ._internal.observability import CacheStats
from ._internal.warnings import (
    CachedMatrixWarning,
    CachedMatrixConditioningWarning,
    CachedMatrixConfigWarning,
)

# makeCacheMatrix/cacheSolve-style aliases.
make_cache_matrix = CachedMatrix
cache_solve = resolve_inverse

__all__ = [
    "CachedMatrix",
    "CacheStats",
    "CachedMatrixWarning",
    "CachedMatrixConditioningWarning",
    "CachedMatrixConfigWarning",
    "COND_WARNING_ENV",
    "DEFAULT_TOL_ENV",
    "InversionFailure",
    "Settings",
    "cache_solve",
    "configure",
    "get_settings",
    "invert",
    "make_cache_matrix",
    "placeholder_matrix",
    "reset_settings",
    "resolve_inverse",
]
