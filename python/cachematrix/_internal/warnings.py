"""cachematrix warning categories.

These exist so users can filter/suppress cachematrix warnings without
catching all UserWarning.

Keep this module lightweight and dependency-free to avoid import cycles.
"""


class CachedMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CachedMatrixConditioningWarning(CachedMatrixWarning):
    """The inverted matrix is ill-conditioned; the inverse may be inaccurate."""


class CachedMatrixConfigWarning(CachedMatrixWarning):
    """A configuration value (usually from the environment) was ignored."""
