"""Parsers for audit results produced upstream."""

from driftlens.parsers.audit_result import load_audit_result, parse_audit_payload

__all__ = ["load_audit_result", "parse_audit_payload"]
