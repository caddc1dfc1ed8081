"""Parser for the JSON audit result returned by the auditing model.

The payload uses the model's camelCase field names::

    {
        "score": 72,
        "semanticDrift": 18,
        "summary": "...",
        "auditedText": "...",
        "url": "https://...",
        "issues": [
            {"severity": "high", "type": "terminology",
             "originalText": "...", "contextSnippet": "...",
             "baselineReference": "...", "suggestedCorrection": "...",
             "reason": "...", "location": "..."}
        ]
    }
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from driftlens.models import AuditResult, Finding, FindingKind, Severity

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_audit_result(path: Path) -> AuditResult:
    """Parse an audit result JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed AuditResult.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON is invalid or has malformed fields.
    """
    if not path.exists():
        raise FileNotFoundError(f"Audit result not found: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return parse_audit_payload(raw)


def parse_audit_payload(raw: Any, content: str = "") -> AuditResult:
    """Build an AuditResult from a decoded audit payload.

    Args:
        raw: The decoded JSON object.
        content: Text that was submitted for auditing; used as the scanned
            content when the payload has no ``auditedText``.

    Raises:
        ValueError: If the payload is not an object, ``issues`` is not a
            list, or an issue has an unknown severity or type or a
            non-string text field.
    """
    if not isinstance(raw, dict):
        msg = f"Audit payload must be a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)

    raw_issues = raw.get("issues") or []
    if not isinstance(raw_issues, list):
        raise ValueError("Audit payload field 'issues' must be a list")

    findings = tuple(
        _parse_issue(issue, position) for position, issue in enumerate(raw_issues)
    )

    result = AuditResult(
        scanned_content=raw.get("auditedText") or content,
        findings=findings,
        score=_number(raw.get("score")),
        semantic_drift=_number(raw.get("semanticDrift")),
        summary=raw.get("summary") or "Audit completed.",
        url=raw.get("url") or "Manual Input",
    )
    logger.info(
        "Parsed audit of %s: %d findings, score %s",
        result.url,
        len(findings),
        result.score,
    )
    return result


def _parse_issue(issue: Mapping[str, Any], position: int) -> Finding:
    """Convert one raw issue into a Finding."""
    if not isinstance(issue, dict):
        raise ValueError(f"Issue {position} must be a JSON object")

    try:
        severity = Severity(issue.get("severity"))
    except ValueError as e:
        raise ValueError(
            f"Issue {position} has unknown severity: {issue.get('severity')!r}"
        ) from e
    try:
        kind = FindingKind(issue.get("type"))
    except ValueError as e:
        msg = f"Issue {position} has unknown type: {issue.get('type')!r}"
        raise ValueError(msg) from e

    return Finding(
        severity=severity,
        kind=kind,
        target_text=_text(issue, "originalText", position),
        context_snippet=_text(issue, "contextSnippet", position),
        baseline_reference=_text(issue, "baselineReference", position),
        suggested_correction=_text(issue, "suggestedCorrection", position),
        reason=_text(issue, "reason", position),
        location_hint=_text(issue, "location", position) or None,
    )


def _text(issue: Mapping[str, Any], key: str, position: int) -> str:
    """Read a string field of an issue, treating missing values as empty."""
    value = issue.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"Issue {position} field '{key}' must be a string, got {value!r}"
        raise ValueError(msg)
    return value


def _number(value: Any) -> float:
    """Coerce a score field, treating missing values as 0."""
    if value is None:
        return 0
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Expected a number, got {value!r}") from e
