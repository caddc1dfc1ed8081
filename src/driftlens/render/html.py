"""HTML rendering of a segment sequence.

Highlighted segments become ``<mark>`` elements carrying the finding index,
so client-side code can wire clicks back to the selection. All text is
escaped.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from driftlens.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from driftlens.models import Finding, Segment


def render_html(
    segments: Iterable[Segment],
    active_index: int | None = None,
    findings: Sequence[Finding] | None = None,
    css_class: str | None = None,
) -> str:
    """Render segments as a ``<pre>`` block with ``<mark>`` highlights.

    Args:
        segments: Output of ``build_segments``.
        active_index: Selected finding; its marks get an extra ``active`` class.
        findings: When given, each mark also carries ``data-severity``.
        css_class: Class for every mark; defaults to the configured one.

    Returns:
        HTML string. An empty segment list renders as an empty ``<pre>``.
    """
    css_class = css_class or get_settings().render.html_class
    parts = ["<pre>"]

    for seg in segments:
        if not seg.is_highlight:
            parts.append(escape(seg.text))
            continue

        classes = css_class
        if seg.finding_index == active_index:
            classes += " active"
        attrs = f'class="{escape(classes)}" data-finding-index="{seg.finding_index}"'
        if findings is not None:
            severity = findings[seg.finding_index].severity
            attrs += f' data-severity="{escape(severity.value)}"'

        parts.append(f"<mark {attrs}>")
        parts.append(escape(seg.text))
        parts.append("</mark>")

    parts.append("</pre>")
    return "".join(parts)
