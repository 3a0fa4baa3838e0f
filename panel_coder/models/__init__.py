"""Data models for the panel coder."""

from .candidate import Candidate, RenamedItem
from .report import MergedRow, ReportGroup, PanelReport

__all__ = [
    "Candidate",
    "RenamedItem",
    "MergedRow",
    "ReportGroup",
    "PanelReport",
]
