from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .formatting import MatrixMixin
from .linalg_cache import resolve_inverse
from .observability import CacheStats


def placeholder_matrix() -> np.ndarray:
    """Value held by a CachedMatrix constructed without a matrix: 0x0 float64."""
    return np.empty((0, 0), dtype=np.float64)


class CachedMatrix(MatrixMixin):
    """A matrix value paired with a single memoized inverse.

    Replacing the matrix (``set_matrix``) or writing one of its entries
    (``cm[i, j] = x``) clears the cached inverse in the same call. The inverse
    itself is filled by :func:`resolve_inverse`; ``set_cached_inverse`` stores
    whatever it is given without checking it.

    Not thread-safe: callers sharing an instance must serialize access.
    """

    def __init__(self, matrix: Any = None, *, inverter: Callable[..., Any] | None = None) -> None:
        if inverter is not None and not callable(inverter):
            raise TypeError("inverter must be callable")
        self._value = placeholder_matrix() if matrix is None else matrix
        self._cached_inverse: Any = None
        self._epoch = 0
        self.inverter = inverter
        self.stats = CacheStats()

    # Matrix slot

    def set_matrix(self, new_value: Any) -> None:
        self._value = new_value
        self._cached_inverse = None
        self._bump_epoch()

    def get_matrix(self) -> Any:
        return self._value

    matrix = property(get_matrix, set_matrix)

    # Inverse slot

    def set_cached_inverse(self, new_inverse: Any) -> None:
        self._cached_inverse = new_inverse

    def get_cached_inverse(self) -> Any:
        return self._cached_inverse

    def has_cached_inverse(self) -> bool:
        return self._cached_inverse is not None

    def invalidate(self) -> None:
        """Drop the cached inverse, e.g. after mutating the matrix in place."""
        self._cached_inverse = None
        self._bump_epoch()

    def inverse(self, *args: Any, **kwargs: Any) -> Any:
        return resolve_inverse(self, *args, **kwargs)

    @property
    def epoch(self) -> int:
        """Number of invalidations since construction."""
        return self._epoch

    def _bump_epoch(self) -> None:
        self._epoch += 1
        self.stats.invalidations += 1

    # Element access

    @property
    def shape(self) -> tuple[int, ...]:
        return np.shape(self._value)

    def __getitem__(self, key: Any) -> Any:
        return np.asarray(self._value)[key]

    def __setitem__(self, key: Any, item: Any) -> None:
        # Writes must land in the stored object itself; asarray() of a list is a copy.
        if not isinstance(self._value, np.ndarray):
            raise TypeError(
                f"In-place writes need a NumPy array value (got {type(self._value).__name__}); "
                "use set_matrix() to replace it"
            )
        self._value[key] = item
        self.invalidate()
