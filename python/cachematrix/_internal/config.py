from __future__ import annotations

import numbers
import os
import warnings
from dataclasses import dataclass, fields, replace
from typing import Any, Callable

from .warnings import CachedMatrixConfigWarning

DEFAULT_TOL_ENV = "CACHEMATRIX_DEFAULT_TOL"
COND_WARNING_ENV = "CACHEMATRIX_COND_WARNING"

_DEFAULT_COND_WARNING = 1e-12


@dataclass(frozen=True)
class Settings:
    # None selects cachematrix.invert.
    inverter: Callable[..., Any] | None = None
    default_tol: float | None = None
    cond_warning_threshold: float = _DEFAULT_COND_WARNING
    edge_items: int = 4


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if value < 0.0 or value != value:
        warnings.warn(
            f"Ignoring {name}={raw!r}: expected a non-negative number.",
            CachedMatrixConfigWarning,
            stacklevel=3,
        )
        return None
    return value


def settings_from_env() -> Settings:
    settings = Settings()
    tol = _env_float(DEFAULT_TOL_ENV)
    if tol is not None:
        settings = replace(settings, default_tol=tol)
    cond = _env_float(COND_WARNING_ENV)
    if cond is not None:
        settings = replace(settings, cond_warning_threshold=cond)
    return settings


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = settings_from_env()
    return _settings


def reset_settings() -> Settings:
    """Drop overrides and re-read the environment."""
    global _settings
    _settings = settings_from_env()
    return _settings


def configure(**changes: Any) -> Settings:
    """Update process-wide settings.

    Accepted keys are the fields of :class:`Settings`. Returns the new settings.
    """

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"Unknown setting(s): {', '.join(unknown)}")

    inverter = changes.get("inverter")
    if inverter is not None and not callable(inverter):
        raise TypeError("inverter must be callable")

    if "cond_warning_threshold" in changes and changes["cond_warning_threshold"] is None:
        raise TypeError("cond_warning_threshold must be a number (use 0 to disable)")

    for key in ("default_tol", "cond_warning_threshold"):
        value = changes.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"{key} must be a real number, not {type(value).__name__}")
        value = float(value)
        if not value >= 0.0:
            raise ValueError(f"{key} must be non-negative")
        changes[key] = value

    if "edge_items" in changes:
        value = changes["edge_items"]
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"edge_items must be an integer, not {type(value).__name__}")
        if int(value) < 1:
            raise ValueError("edge_items must be at least 1")
        changes["edge_items"] = int(value)

    global _settings
    _settings = replace(get_settings(), **changes)
    return _settings
