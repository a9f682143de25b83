"""Reports on where marker files are now versus where they were mirrored."""

from dummyfiles_core.report.collector import make_file_report, make_file_reports
from dummyfiles_core.report.models import FileReport
from dummyfiles_core.report.render import (
    render_report_table,
    text_report_lines,
    write_html_report,
)

__all__ = [
    "FileReport",
    "make_file_report",
    "make_file_reports",
    "render_report_table",
    "text_report_lines",
    "write_html_report",
]
