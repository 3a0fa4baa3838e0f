"""
Panel Coder v1.0

Gives drawing panel blocks short dimension-coded names and exports a
grouped area report.

Stages:
- Code assignment: length -> 1, 2, 3 ...; width -> A, B, ... Z, AA ...
- Renaming: NAME -> NAME-<length code>-<width code>
- Report: group by name prefix, merge duplicates, total areas (m^2)
"""

__version__ = "1.0.0"

from .models import Candidate, RenamedItem, MergedRow, ReportGroup, PanelReport
from .coding import assign_codes, CodeAssigner, to_column_letters, normalize_dimension
from .report import build_report, render_csv, write_report
from .pipeline import run_naming, RunResult

__all__ = [
    "Candidate",
    "RenamedItem",
    "MergedRow",
    "ReportGroup",
    "PanelReport",
    "assign_codes",
    "CodeAssigner",
    "to_column_letters",
    "normalize_dimension",
    "build_report",
    "render_csv",
    "write_report",
    "run_naming",
    "RunResult",
]
