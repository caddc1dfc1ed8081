"""Glue between one audit snapshot, its segments and the selection.

An ``AuditSession`` is owned by a single view. Loading a new snapshot
recomputes the segments and resets the selection to idle.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from driftlens.highlight import selection
from driftlens.highlight.segmenter import cached_compose

if TYPE_CHECKING:
    from driftlens.models import AuditResult, Finding, Segment

logger = logging.getLogger(__name__)


class AuditSession:
    """Segments and selection state for the audit result being displayed."""

    def __init__(self, result: AuditResult) -> None:
        self._result = result
        self._segments: tuple[Segment, ...] = ()
        self._state = selection.IDLE
        self.load(result)

    @property
    def result(self) -> AuditResult:
        return self._result

    @property
    def findings(self) -> tuple[Finding, ...]:
        return self._result.findings

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def state(self) -> selection.SelectionState:
        return self._state

    def load(self, result: AuditResult) -> None:
        """Replace the displayed snapshot and reset the selection."""
        self._result = result
        self._segments = cached_compose(result.scanned_content, result.findings)
        self._state = selection.IDLE
        logger.debug(
            "Loaded audit of %d chars: %d findings, %d segments",
            len(result.scanned_content),
            len(result.findings),
            len(self._segments),
        )

    def select(self, index: int) -> bool:
        """Select finding *index*. Returns False if the index was rejected."""
        if not selection.is_valid_index(index, len(self.findings)):
            return False
        self._state = selection.select(self._state, index, len(self.findings))
        return True

    def clear(self) -> None:
        self._state = selection.clear(self._state)

    def current(self) -> int | None:
        return selection.current(self._state)

    def active_finding(self) -> Finding | None:
        """The selected finding, or None when idle."""
        index = self.current()
        if index is None:
            return None
        return self.findings[index]

    def is_active(self, segment: Segment) -> bool:
        """True for a highlighted segment belonging to the selected finding."""
        return segment.is_highlight and segment.finding_index == self.current()

    def unmatched_findings(self) -> list[int]:
        """Indices of findings with no highlighted segment.

        These are findings whose target text is empty, absent from the
        document, or only found inside text claimed by an earlier finding.
        """
        shown = {s.finding_index for s in self._segments if s.is_highlight}
        return [i for i in range(len(self.findings)) if i not in shown]
