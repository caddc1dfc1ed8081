"""Highlight composition: locate findings, build segments, track selection."""

from driftlens.highlight.locator import locate_spans
from driftlens.highlight.segmenter import (
    build_segments,
    cached_compose,
    clear_compose_cache,
    compose_segments,
    dropped_spans,
)
from driftlens.highlight.selection import IDLE, SelectionState, clear, current, select
from driftlens.highlight.session import AuditSession

__all__ = [
    "IDLE",
    "AuditSession",
    "SelectionState",
    "build_segments",
    "cached_compose",
    "clear",
    "clear_compose_cache",
    "compose_segments",
    "current",
    "dropped_spans",
    "locate_spans",
    "select",
]
