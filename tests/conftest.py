"""Shared pytest fixtures for DriftLens tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from driftlens.config import get_settings
from driftlens.highlight import clear_compose_cache
from driftlens.models import Finding, FindingKind, Severity

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture(autouse=True)
def _reset_caches() -> Generator[None]:
    """Give every test fresh settings and an empty composition cache."""
    get_settings.cache_clear()
    clear_compose_cache()
    yield
    get_settings.cache_clear()
    clear_compose_cache()


def finding(
    target_text: str,
    severity: Severity = Severity.MEDIUM,
    kind: FindingKind = FindingKind.TERMINOLOGY,
    **kwargs: str,
) -> Finding:
    """Build a Finding with only the fields a test cares about."""
    return Finding(severity=severity, kind=kind, target_text=target_text, **kwargs)


@pytest.fixture
def make_finding() -> Callable[..., Finding]:
    return finding
