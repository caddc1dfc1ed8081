"""Tests for partitioning a document into highlight segments."""

from __future__ import annotations

import logging

import pytest

from driftlens.highlight.segmenter import (
    build_segments,
    cached_compose,
    compose_segments,
    dropped_spans,
)
from driftlens.models import Segment, Span
from tests.conftest import finding


def _texts(segments: list[Segment]) -> list[tuple[str, int | None]]:
    return [(s.text, s.finding_index) for s in segments]


def _assert_partition(document: str, segments: list[Segment]) -> None:
    """Segments reproduce the document and share boundaries."""
    assert "".join(s.text for s in segments) == document
    if not document:
        assert segments == []
        return
    assert segments[0].start == 0
    assert segments[-1].end == len(document)
    for left, right in zip(segments, segments[1:], strict=False):
        assert left.end == right.start
    for seg in segments:
        assert seg.text == document[seg.start : seg.end]
        assert seg.start < seg.end


class TestScenarios:
    """Worked examples of highlight composition."""

    def test_two_findings_no_overlap(self) -> None:
        """Highlights interleave with the plain text between them."""
        doc = "Legacy database is great. Easy to use."
        segments = compose_segments(doc, [finding("Legacy database"), finding("Easy")])

        assert _texts(segments) == [
            ("Legacy database", 0),
            (" is great. ", None),
            ("Easy", 1),
            (" to use.", None),
        ]
        _assert_partition(doc, segments)

    def test_overlap_first_claim_wins(self) -> None:
        """The later overlapping span is dropped, not merged or nested."""
        doc = "abcdef"
        segments = compose_segments(doc, [finding("abcd"), finding("cdef")])

        assert _texts(segments) == [("abcd", 0), ("ef", None)]

    def test_no_match_finding_ignored(self) -> None:
        doc = "Legacy database is great."
        segments = compose_segments(doc, [finding("NoSQL only"), finding("great")])

        assert _texts(segments) == [
            ("Legacy database is ", None),
            ("great", 1),
            (".", None),
        ]

    def test_empty_document(self) -> None:
        """Empty document yields no segments whatever the findings."""
        assert compose_segments("", [finding("a"), finding("")]) == []


class TestBuildSegments:
    """Tests for build_segments on hand-made spans."""

    def test_no_spans_single_plain_segment(self) -> None:
        assert build_segments("hello", []) == [Segment(0, 5, "hello")]

    def test_whole_document_highlighted(self) -> None:
        assert build_segments("hello", [Span(0, 5, 3)]) == [Segment(0, 5, "hello", 3)]

    def test_adjacent_spans_no_empty_plain_segment(self) -> None:
        """A span starting exactly at the cursor is kept, with no gap segment."""
        segments = build_segments("abcd", [Span(2, 4, 1), Span(0, 2, 0)])
        assert _texts(segments) == [("ab", 0), ("cd", 1)]

    def test_equal_start_lower_finding_index_wins(self) -> None:
        """Ties on start keep production order."""
        segments = build_segments("abcdef", [Span(0, 2, 0), Span(0, 4, 1)])
        assert _texts(segments) == [("ab", 0), ("cdef", None)]

    def test_equal_start_order_is_production_order(self) -> None:
        """Sort is stable: the first-produced span wins even at a higher index."""
        segments = build_segments("abcdef", [Span(0, 4, 1), Span(0, 2, 0)])
        assert _texts(segments) == [("abcd", 1), ("ef", None)]

    def test_contained_span_dropped(self) -> None:
        segments = build_segments("abcdef", [Span(0, 6, 0), Span(2, 3, 1)])
        assert _texts(segments) == [("abcdef", 0)]

    def test_span_after_dropped_span_still_kept(self) -> None:
        """Dropping does not move the cursor."""
        spans = [Span(0, 3, 0), Span(2, 5, 1), Span(4, 6, 2)]
        segments = build_segments("abcdefg", spans)
        assert _texts(segments) == [("abc", 0), ("d", None), ("ef", 2), ("g", None)]

    def test_drop_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="driftlens.highlight.segmenter"):
            build_segments("abcdef", [Span(0, 4, 0), Span(2, 6, 1)])
        assert "finding 1" in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestPartitionLaw:
    """Segments always tile the document exactly."""

    @pytest.mark.parametrize(
        ("document", "targets"),
        [
            ("Legacy database is great. Easy to use.", ["Legacy database", "Easy"]),
            ("abcdef", ["abcd", "cdef"]),
            ("aaaaaa", ["aa", "a", "aaa"]),
            ("The quick brown fox", ["quick brown", "brown fox", "", "fox"]),
            ("no matches here", ["zzz"]),
            ("Cheap, CHEAP, cheap!", ["cheap"]),
            ("x", ["x"]),
        ],
    )
    def test_partition(self, document: str, targets: list[str]) -> None:
        segments = compose_segments(document, [finding(t) for t in targets])
        _assert_partition(document, segments)

    def test_occurrence_count(self) -> None:
        """k non-colliding occurrences give k highlighted segments."""
        doc = "Cheap hosting, cheap storage, CHEAP support."
        segments = compose_segments(doc, [finding("cheap")])
        assert sum(1 for s in segments if s.finding_index == 0) == 3


class TestDroppedSpans:
    """Tests for dropped_spans diagnostics."""

    def test_reports_overlapping_span(self) -> None:
        assert dropped_spans([Span(0, 4, 0), Span(2, 6, 1)]) == [Span(2, 6, 1)]

    def test_nothing_dropped(self) -> None:
        assert dropped_spans([Span(0, 2, 0), Span(2, 4, 1)]) == []


class TestCachedCompose:
    """Tests for the memoised composition."""

    def test_matches_uncached(self) -> None:
        doc = "Legacy database is great. Easy to use."
        findings = [finding("Legacy database"), finding("Easy")]
        assert list(cached_compose(doc, findings)) == compose_segments(doc, findings)

    def test_equal_inputs_share_result(self) -> None:
        """Equal content hits the cache regardless of list identity."""
        doc = "abcdef"
        first = cached_compose(doc, [finding("abcd")])
        second = cached_compose(doc, [finding("abcd")])
        assert first is second

    def test_changed_findings_recompute(self) -> None:
        doc = "abcdef"
        first = cached_compose(doc, [finding("abcd")])
        second = cached_compose(doc, [finding("cdef")])
        assert first != second
