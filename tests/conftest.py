# tests/conftest.py

"""
Shared fixtures for the agecalc test suite.
"""

from datetime import date

import pytest


@pytest.fixture
def mid_2022() -> date:
    """A pinned 'today' so tests don't depend on the wall clock."""
    return date(2022, 6, 15)


@pytest.fixture
def clean_env(monkeypatch):
    """Removes any AGECALC_* variables inherited from the developer's shell."""
    for name in ("AGECALC_REFERENCE_DATE", "AGECALC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
