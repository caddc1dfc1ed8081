"""Partition a document into plain and highlighted segments.

Overlap policy is first claim wins: spans are walked in ``start`` order
(ties keep the order the locator produced them in, i.e. lower finding index
first) and any span that begins inside text already claimed is discarded.
Discarded spans are not merged, nested or truncated.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from driftlens.highlight.locator import locate_spans
from driftlens.models import Segment

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from driftlens.models import Finding, Span

logger = logging.getLogger(__name__)


def _walk(spans: Iterable[Span]) -> tuple[list[Span], list[Span]]:
    """Split *spans* into those that claim text and those that lose."""
    kept: list[Span] = []
    dropped: list[Span] = []
    cursor = 0
    # sorted() is stable, so equal starts keep locator order.
    for span in sorted(spans, key=lambda s: s.start):
        if span.start < cursor:
            dropped.append(span)
            continue
        kept.append(span)
        cursor = span.end
    return kept, dropped


def build_segments(document: str, spans: Iterable[Span]) -> list[Segment]:
    """Build the ordered, gapless segment list for *document*.

    Concatenating ``segment.text`` over the result reproduces *document*
    exactly. An empty document yields an empty list.

    Args:
        document: The audited text.
        spans: Spans from ``locate_spans``, in the order it produced them.

    Returns:
        Segments in ascending order; adjacent segments share a boundary.
    """
    if not document:
        return []

    kept, dropped = _walk(spans)
    for span in dropped:
        logger.debug(
            "Dropping span %d-%d of finding %d: overlaps an earlier highlight",
            span.start,
            span.end,
            span.finding_index,
        )

    segments: list[Segment] = []
    cursor = 0
    for span in kept:
        if span.start > cursor:
            segments.append(Segment(cursor, span.start, document[cursor : span.start]))
        segments.append(
            Segment(
                span.start,
                span.end,
                document[span.start : span.end],
                span.finding_index,
            )
        )
        cursor = span.end

    if cursor < len(document):
        segments.append(Segment(cursor, len(document), document[cursor:]))

    return segments


def dropped_spans(spans: Iterable[Span]) -> list[Span]:
    """Return the spans ``build_segments`` discards for overlapping."""
    return _walk(spans)[1]


def compose_segments(document: str, findings: Sequence[Finding]) -> list[Segment]:
    """Locate every finding in *document* and build its segments."""
    return build_segments(document, locate_spans(document, findings))


@lru_cache(maxsize=64)
def _cached_compose(
    document: str, findings: tuple[Finding, ...]
) -> tuple[Segment, ...]:
    return tuple(compose_segments(document, findings))


def cached_compose(
    document: str, findings: Sequence[Finding]
) -> tuple[Segment, ...]:
    """Memoised ``compose_segments`` keyed by the content of its inputs.

    Call ``clear_compose_cache()`` to reset.
    """
    return _cached_compose(document, tuple(findings))


def clear_compose_cache() -> None:
    """Forget every memoised composition."""
    _cached_compose.cache_clear()
