"""Data models for DriftLens audits."""

from driftlens.models.audit import (
    AuditResult,
    Finding,
    FindingKind,
    Segment,
    Severity,
    Span,
)

__all__ = [
    "AuditResult",
    "Finding",
    "FindingKind",
    "Segment",
    "Severity",
    "Span",
]
