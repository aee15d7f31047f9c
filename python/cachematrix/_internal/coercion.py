from __future__ import annotations

from typing import Any

import numpy as np

from .errors import InversionFailure

# bool, signed/unsigned int, float, complex
_NUMERIC_KINDS = "biufc"


def as_square_array(candidate: Any) -> np.ndarray:
    """Coerce a matrix-like value to a square 2D floating/complex array.

    Integer and boolean inputs are promoted to float64 so inversion is exact
    in the usual sense.
    """

    try:
        array = np.asarray(candidate)
    except Exception as exc:
        raise InversionFailure(f"Cannot interpret {type(candidate).__name__} as a matrix") from exc

    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InversionFailure(f"Matrix entries must be numeric (got dtype {array.dtype})")
    if array.ndim != 2:
        raise InversionFailure(f"Matrix input must be 2D (got {array.ndim}D)")
    if array.shape[0] != array.shape[1]:
        raise InversionFailure(
            f"Matrix must be square to invert (got shape {array.shape[0]}x{array.shape[1]})"
        )
    if not np.issubdtype(array.dtype, np.inexact):
        array = array.astype(np.float64)
    return array


def as_rhs_array(candidate: Any, size: int) -> np.ndarray:
    """Coerce a right-hand side for ``solve``: a vector or a matrix with ``size`` rows."""
    array = np.asarray(candidate)
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InversionFailure(f"Right-hand side must be numeric (got dtype {array.dtype})")
    if array.ndim not in (1, 2) or array.shape[0] != size:
        raise InversionFailure(
            f"Right-hand side must have {size} rows (got shape {array.shape})"
        )
    if not np.issubdtype(array.dtype, np.inexact):
        array = array.astype(np.float64)
    return array
