from __future__ import annotations

import os
import sys
import warnings
from typing import Any

import numpy as np

from .coercion import as_rhs_array, as_square_array
from .config import get_settings
from .errors import InversionFailure
from .warnings import CachedMatrixConditioningWarning

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


def _rcond(a: np.ndarray, inv: np.ndarray | None = None) -> float:
    """Reciprocal 1-norm condition number of ``a`` (R's ``rcond``).

    With a precomputed inverse this costs O(n^2); otherwise ``np.linalg.cond``
    forms the inverse itself.
    """

    if inv is not None:
        denom = float(np.linalg.norm(a, 1)) * float(np.linalg.norm(inv, 1))
    else:
        denom = float(np.linalg.cond(a, 1))
    return 1.0 / denom if denom > 0.0 else 0.0


def _external_stacklevel() -> int:
    """``stacklevel`` pointing at the first frame outside this package."""
    frame = sys._getframe(1)
    level = 1
    while frame is not None and os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
        level += 1
    return level


def invert(matrix: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Invert ``matrix``, or solve ``matrix @ x = b`` when ``b`` is given.

    Parameters
    ----------
    matrix:
        Square 2D array-like.
    b:
        Optional right-hand side (vector or matrix). When omitted the full
        inverse is returned.
    tol:
        Reject the matrix as computationally singular if its reciprocal
        condition number falls below this value. Defaults to the configured
        ``default_tol`` (no check when that is ``None``).

    Raises
    ------
    InversionFailure
        The input is not a square matrix, is singular, or fails the ``tol`` check.
    """

    a = as_square_array(matrix)
    n = a.shape[0]
    rhs = None if b is None else as_rhs_array(b, n)

    if n == 0:
        if rhs is None:
            return np.empty((0, 0), dtype=a.dtype)
        return np.empty(rhs.shape, dtype=np.result_type(a, rhs))

    settings = get_settings()
    if tol is None:
        tol = settings.default_tol
    if tol is not None and tol < 0:
        raise ValueError("tol must be non-negative")

    try:
        if rhs is None:
            result = np.linalg.inv(a)
            rcond = _rcond(a, result)
        else:
            result = np.linalg.solve(a, rhs)
            needs_rcond = bool(tol) or settings.cond_warning_threshold > 0.0
            rcond = _rcond(a) if needs_rcond else 1.0
    except np.linalg.LinAlgError as exc:
        raise InversionFailure(f"Matrix is singular and cannot be inverted: {exc}") from exc

    if tol is not None and rcond < tol:
        raise InversionFailure(
            f"System is computationally singular: reciprocal condition number = {rcond:g}"
        )

    if rcond < settings.cond_warning_threshold:
        warnings.warn(
            f"Matrix is ill-conditioned (reciprocal condition number = {rcond:g}); "
            "the inverse may be inaccurate.",
            CachedMatrixConditioningWarning,
            stacklevel=_external_stacklevel(),
        )

    return result
