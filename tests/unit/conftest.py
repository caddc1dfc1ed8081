"""Shared fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture
def mongodb_audit_path() -> Path:
    """Path to the sample MongoDB home page audit."""
    return FIXTURES_DIR / "mongodb_audit.json"
