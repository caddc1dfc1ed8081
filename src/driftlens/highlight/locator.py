"""Locate every occurrence of each finding's target text in a document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from driftlens.models import Span

if TYPE_CHECKING:
    from collections.abc import Sequence

    from driftlens.models import Finding

logger = logging.getLogger(__name__)


def _fold(text: str) -> str:
    """Lower-case *text* without changing its length.

    A few characters (e.g. U+0130) lower-case to more than one code point;
    those are left as-is so offsets into the folded text stay valid in the
    original.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def find_occurrences(haystack: str, needle: str) -> list[int]:
    """Return start offsets of non-overlapping occurrences of *needle*.

    Both arguments are expected to be lower-cased already. Scanning resumes
    at the end of the previous match, so ``"aa"`` occurs once in ``"aaa"``.
    An empty needle never matches.
    """
    if not needle:
        return []

    starts: list[int] = []
    pos = haystack.find(needle)
    while pos != -1:
        starts.append(pos)
        pos = haystack.find(needle, pos + len(needle))
    return starts


def locate_spans(document: str, findings: Sequence[Finding]) -> list[Span]:
    """Find the spans each finding claims in *document*.

    Matching is literal and case-insensitive. The result holds one run of
    spans per finding, in finding order, each run in scan order. Findings
    whose target text is empty or absent contribute nothing.

    Args:
        document: The audited text.
        findings: Findings in their canonical order.

    Returns:
        Spans whose ``finding_index`` is the finding's position in *findings*.
    """
    lowered = _fold(document)
    spans: list[Span] = []

    for idx, finding in enumerate(findings):
        target = finding.target_text or ""
        if not target:
            logger.debug("Finding %d has empty target text; skipped", idx)
            continue

        starts = find_occurrences(lowered, _fold(target))
        if not starts:
            logger.debug("Finding %d target %r not found in document", idx, target)
        spans.extend(Span(s, s + len(target), idx) for s in starts)

    return spans
