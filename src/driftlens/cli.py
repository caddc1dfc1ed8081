"""Command-line viewer for saved audit results.

Usage:
    uv run driftlens-view result.json [--select N] [--list] [--html OUT]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    import argparse

console = Console()

logger = logging.getLogger(__name__)


def _build_view_parser() -> argparse.ArgumentParser:
    """Build argparse parser for driftlens-view."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="driftlens-view",
        description="Render an audit result with its findings highlighted.",
    )
    parser.add_argument("result", type=Path, help="Audit result JSON file")
    parser.add_argument(
        "--select",
        type=int,
        metavar="N",
        help="Select finding N and show its details",
    )
    parser.add_argument(
        "--list", action="store_true", help="Also print the list of all findings"
    )
    parser.add_argument(
        "--html", type=Path, metavar="OUT", help="Write the page view as HTML to OUT"
    )
    return parser


def view(argv: list[str] | None = None) -> int:
    """Render an audit result file. Returns the process exit status."""
    from driftlens import _setup_logging
    from driftlens.config import get_settings
    from driftlens.highlight import AuditSession
    from driftlens.parsers import load_audit_result
    from driftlens.render import (
        render_finding_detail,
        render_findings_table,
        render_html,
        render_page,
        render_summary,
    )

    args = _build_view_parser().parse_args(argv)
    settings = get_settings()
    _setup_logging(settings.app.log_dir, settings.app.log_level)

    try:
        result = load_audit_result(args.result)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        return 1

    session = AuditSession(result)
    if args.select is not None and not session.select(args.select):
        console.print(
            f"[red]Error:[/] no finding {args.select} "
            f"(result has {len(session.findings)} findings)"
        )
        return 1

    console.print(render_summary(result))
    console.print(render_page(session.segments, session.current(), settings.render))
    console.print()
    console.print(render_finding_detail(session.active_finding()))

    unmatched = session.unmatched_findings()
    if unmatched and settings.render.show_unmatched:
        console.print(
            f"[dim]{len(unmatched)} finding(s) not highlighted in page view: "
            f"{', '.join(str(i) for i in unmatched)}[/]"
        )

    if args.list:
        console.print(
            render_findings_table(session.findings, unmatched, session.current())
        )

    if args.html is not None:
        args.html.parent.mkdir(parents=True, exist_ok=True)
        args.html.write_text(
            render_html(session.segments, session.current(), session.findings),
            encoding="utf-8",
        )
        logger.info("Wrote HTML page view to %s", args.html)

    return 0


def main() -> None:
    """Entry point for the driftlens-view console script."""
    sys.exit(view(sys.argv[1:]))
