"""Data models for audit results and their highlighted rendering.

These are plain frozen dataclasses. A finding is identified by its position
in ``AuditResult.findings``; spans and segments refer back to findings by
that integer index rather than holding the finding itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    """How serious a finding is."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FindingKind(StrEnum):
    """What aspect of the baseline messaging a finding violates."""

    MESSAGING = "messaging"
    STYLE = "style"
    TERMINOLOGY = "terminology"
    SEMANTIC_DRIFT = "semantic-drift"


@dataclass(frozen=True)
class Finding:
    """A single compliance violation reported against the audited text.

    Attributes:
        severity: How serious the violation is.
        kind: Category of the violation.
        target_text: Literal snippet, as it appears in the audited text.
        context_snippet: The surrounding paragraph, for context.
        baseline_reference: The statement from the baseline it violates.
        suggested_correction: How to fix it.
        reason: Why it is a violation.
        location_hint: Free-form location description, if one was given.
    """

    severity: Severity
    kind: FindingKind
    target_text: str
    context_snippet: str = ""
    baseline_reference: str = ""
    suggested_correction: str = ""
    reason: str = ""
    location_hint: str | None = None


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` claimed by one finding."""

    start: int
    end: int
    finding_index: int


@dataclass(frozen=True)
class Segment:
    """A contiguous slice of the document, plain or highlighted.

    Attributes:
        start: Start character index (inclusive).
        end: End character index (exclusive).
        text: ``document[start:end]``.
        finding_index: Index of the justifying finding, or None for plain text.
    """

    start: int
    end: int
    text: str
    finding_index: int | None = None

    @property
    def is_highlight(self) -> bool:
        return self.finding_index is not None


@dataclass(frozen=True)
class AuditResult:
    """One immutable audit snapshot: the audited text plus its findings.

    ``score`` and ``semantic_drift`` are percentages computed upstream and
    are carried through untouched.
    """

    scanned_content: str
    findings: tuple[Finding, ...] = ()
    score: float = 0
    semantic_drift: float = 0
    summary: str = "Audit completed."
    url: str = "Manual Input"
