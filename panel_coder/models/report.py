"""Report data structures produced by the aggregation engine."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class MergedRow:
    """One report line: renamed items sharing a name, with their count."""
    name: str
    length: str
    width: str
    quantity: int = 1
    area: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "length": self.length,
            "width": self.width,
            "quantity": self.quantity,
            "area": self.area,
        }


@dataclass
class ReportGroup:
    """
    Merged rows sharing a grouping prefix.

    Attributes:
        prefix: Original id with its last hyphen segment stripped
        rows: Merged rows in first-seen order
    """
    prefix: str
    rows: List[MergedRow] = field(default_factory=list)

    @property
    def subtotal(self) -> float:
        """Sum of row areas in square meters."""
        return sum(row.area for row in self.rows)

    @property
    def quantity(self) -> int:
        """Number of items in the group before merging."""
        return sum(row.quantity for row in self.rows)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "prefix": self.prefix,
            "rows": [r.to_dict() for r in self.rows],
            "subtotal": self.subtotal,
        }


@dataclass
class PanelReport:
    """
    Grouped area report, groups ordered by prefix.

    Usage:
        report = build_report(items)
        print(report.grand_total)
        write_report(report, "drawing_Panels.csv")
    """
    groups: List[ReportGroup] = field(default_factory=list)

    @property
    def grand_total(self) -> float:
        """Sum of all group subtotals."""
        return sum(g.subtotal for g in self.groups)

    @property
    def prefixes(self) -> List[str]:
        return [g.prefix for g in self.groups]

    def group(self, prefix: str) -> ReportGroup:
        """Get a group by prefix. Raises KeyError if absent."""
        for g in self.groups:
            if g.prefix == prefix:
                return g
        raise KeyError(prefix)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "groups": [g.to_dict() for g in self.groups],
            "grandTotal": self.grand_total,
        }
