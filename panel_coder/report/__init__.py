"""Report generation module for the panel coder."""

from .aggregate import derive_prefix, calculate_area, build_report
from .csv_writer import escape_csv, format_area, render_csv, write_report, default_report_path

__all__ = [
    "derive_prefix",
    "calculate_area",
    "build_report",
    "escape_csv",
    "format_area",
    "render_csv",
    "write_report",
    "default_report_path",
]
