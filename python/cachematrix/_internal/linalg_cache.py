from __future__ import annotations

from typing import Any, Callable

from .config import get_settings
from .inversion import invert


def inversion_routine(cached_matrix: Any) -> Callable[..., Any]:
    """The routine used to fill ``cached_matrix``'s slot on a miss."""
    routine = getattr(cached_matrix, "inverter", None)
    if routine is None:
        routine = get_settings().inverter
    if routine is None:
        routine = invert
    return routine


def resolve_inverse(cached_matrix: Any, *args: Any, **kwargs: Any) -> Any:
    """Return the inverse of the matrix held by ``cached_matrix``.

    The inverse is computed only when the slot is empty; the result is stored
    before returning so later calls are pure cache hits. ``args``/``kwargs``
    are forwarded to the inversion routine on that computing call only and
    are ignored on hits.

    Errors from the inversion routine propagate unchanged and leave the slot
    empty.
    """

    stats = getattr(cached_matrix, "stats", None)

    inverse = cached_matrix.get_cached_inverse()
    if inverse is not None:
        if stats is not None:
            stats.hits += 1
        return inverse

    if stats is not None:
        stats.misses += 1
    routine = inversion_routine(cached_matrix)
    try:
        inverse = routine(cached_matrix.get_matrix(), *args, **kwargs)
    except Exception:
        if stats is not None:
            stats.failures += 1
        raise

    cached_matrix.set_cached_inverse(inverse)
    return inverse
