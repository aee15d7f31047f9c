from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class CacheStats:
    """Per-container cache counters.

    ``misses`` counts calls that invoked the inversion routine, including the
    ones that failed; ``failures`` counts only the latter.
    """

    hits: int = 0
    misses: int = 0
    invalidations: int = 0
    failures: int = 0

    @property
    def computations(self) -> int:
        return self.misses - self.failures

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.invalidations = 0
        self.failures = 0
