import pytest

import cachematrix


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings with no environment overrides."""
    monkeypatch.delenv(cachematrix.DEFAULT_TOL_ENV, raising=False)
    monkeypatch.delenv(cachematrix.COND_WARNING_ENV, raising=False)
    cachematrix.reset_settings()
    yield
    monkeypatch.delenv(cachematrix.DEFAULT_TOL_ENV, raising=False)
    monkeypatch.delenv(cachematrix.COND_WARNING_ENV, raising=False)
    cachematrix.reset_settings()
