"""Reference renderers for highlighted audit results."""

from driftlens.render.html import render_html
from driftlens.render.terminal import (
    render_finding_detail,
    render_findings_table,
    render_page,
    render_summary,
    score_style,
    severity_style,
)

__all__ = [
    "render_finding_detail",
    "render_findings_table",
    "render_html",
    "render_page",
    "render_summary",
    "score_style",
    "severity_style",
]
