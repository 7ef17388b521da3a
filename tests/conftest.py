"""Test fixtures for the field validators."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def verbose(monkeypatch):
    """Turn on per-call verdict logging."""
    from formfields.config import settings

    monkeypatch.setattr(settings, "VERBOSE", True)


@pytest.fixture
def restore_registry():
    """Snapshot the validator registry and restore it after the test."""
    from formfields import validators

    saved = dict(validators._VALIDATORS)
    yield
    validators._VALIDATORS.clear()
    validators._VALIDATORS.update(saved)
