"""Text and HTML renderings of file reports."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from rich.console import Console
from rich.table import Table

from dummyfiles_core.report.models import FileReport

logger = logging.getLogger(__name__)


def text_report_lines(reports: list[FileReport]) -> list[str]:
    """Two sentences per report: one about the name, one about the location."""
    lines: list[str] = []
    for r in reports:
        if r.is_ignore or r.has_error:
            continue
        if r.has_been_renamed:
            lines.append(f'the file "{r.original_name}" has been renamed to "{r.current_name}"')
        else:
            lines.append(f'"{r.original_name}" has not been renamed')
        if r.has_been_moved:
            lines.append(
                f'  it was moved from "{r.original_location}" to "{r.current_location}"'
            )
        else:
            lines.append(f"  it has not been moved from {r.original_location}")
    return lines


def render_report_table(reports: list[FileReport]) -> Table:
    """A table with the current location and name of each marker.

    The original location and name are shown only where they changed.
    """
    table = Table(title=f"Marker Files ({len(reports)})")
    table.add_column("Location", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Original location", style="yellow")
    table.add_column("Original name", style="yellow")
    for r in reports:
        if r.is_ignore:
            table.add_row(r.current_location, r.current_name, "[dim]ignored[/dim]", "")
            continue
        if r.has_error:
            table.add_row(r.current_location, r.current_name, "[red]unreadable[/red]", "")
            continue
        table.add_row(
            r.current_location,
            r.current_name,
            r.original_location if r.has_been_moved else "",
            r.original_name if r.has_been_renamed else "",
        )
    return table


def write_html_report(reports: list[FileReport], path: Path) -> Path:
    """Write the report table as a standalone HTML page at *path*."""
    console = Console(record=True, file=io.StringIO(), width=160)
    console.print(render_report_table(reports))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(console.export_html(inline_styles=True), encoding="utf-8")
    logger.info("wrote HTML report %s (%d files)", path, len(reports))
    return path
