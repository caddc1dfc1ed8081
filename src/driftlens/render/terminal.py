"""Terminal rendering of audit results with rich.

Plain segments are written unstyled, highlighted segments in the highlight
style, and the segments of the selected finding in the active style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from driftlens.config import get_settings
from driftlens.models import Severity

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Sequence

    from driftlens.config import RenderConfig
    from driftlens.models import AuditResult, Finding, Segment

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "bold dark_orange",
    Severity.LOW: "bold blue",
}


def severity_style(severity: Severity | str) -> str:
    """Rich style for a severity label; unknown values render dim."""
    try:
        return SEVERITY_STYLES[Severity(severity)]
    except ValueError:
        return "dim"


def score_style(score: float) -> str:
    """Colour for an alignment score: green >= 90, amber >= 70, else red."""
    if score >= 90:
        return "bold green"
    if score >= 70:
        return "bold dark_orange"
    return "bold red"


def render_page(
    segments: Iterable[Segment],
    active_index: int | None = None,
    config: RenderConfig | None = None,
) -> Text:
    """Render the segment sequence as a single rich Text."""
    config = config or get_settings().render
    text = Text()
    for seg in segments:
        if not seg.is_highlight:
            text.append(seg.text, style=config.plain_style)
        elif seg.finding_index == active_index:
            text.append(seg.text, style=config.active_style)
        else:
            text.append(seg.text, style=config.highlight_style)
    return text


def render_summary(result: AuditResult) -> Panel:
    """Scores and executive summary for one audit."""
    header = Text()
    header.append("Truth Alignment: ", style="dim")
    header.append(f"{result.score:g}%", style=score_style(result.score))
    header.append("   Semantic Drift: ", style="dim")
    header.append(f"{result.semantic_drift:g}%", style="bold")

    body = Text()
    body.append(f'"{result.summary}"', style="italic")

    return Panel(
        Group(header, body),
        title="Audit Results",
        subtitle=Text(f"Target: {result.url}"),
    )


def render_finding_detail(finding: Finding | None) -> Panel:
    """Details of the selected finding, or a placeholder when idle."""
    if finding is None:
        return Panel(
            Text("Select a violation to inspect", style="dim", justify="center"),
            title="Finding",
        )

    text = Text()
    text.append(
        f"{finding.severity.upper()} PRIORITY", style=severity_style(finding.severity)
    )
    text.append(f"  {finding.kind}\n\n", style="dim")
    text.append("Ground Truth Standard\n", style="bold blue")
    text.append(f'"{finding.baseline_reference}"\n\n')
    text.append("Correction\n", style="bold green")
    text.append(f"{finding.suggested_correction}\n\n", style="italic")
    text.append("Reason\n", style="bold")
    text.append(finding.reason)
    if finding.location_hint:
        text.append(f"\n\nLocation: {finding.location_hint}", style="dim")
    return Panel(text, title="Finding")


def render_findings_table(
    findings: Sequence[Finding],
    unmatched: Collection[int] = (),
    active_index: int | None = None,
) -> Table:
    """List view of every finding, including those with no highlight."""
    table = Table(title="Deltas List", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Severity")
    table.add_column("Type")
    table.add_column("Text")
    table.add_column("Correction")
    table.add_column("In page", justify="center")

    for idx, finding in enumerate(findings):
        marker = "*" if idx == active_index else ""
        table.add_row(
            f"{marker}{idx}",
            Text(finding.severity.value, style=severity_style(finding.severity)),
            finding.kind.value,
            Text(finding.target_text),
            Text(finding.suggested_correction),
            "no" if idx in unmatched else "yes",
        )
    return table
