"""Aggregation of renamed items into a grouped area report.

Items are grouped by the prefix of their original id (the id minus its
last "-segment"), groups are sorted by prefix, and items sharing a new
name are merged into one row with a quantity.

Areas assume millimeter dimensions and are reported in square meters:

    area = length * width * quantity / 1_000_000

Rows whose length or width is not numeric get an area of 0 and are still
listed.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..config import Config, default_config
from ..coding.normalizer import parse_dimension
from ..models.candidate import RenamedItem
from ..models.report import MergedRow, ReportGroup, PanelReport

logger = logging.getLogger(__name__)


def derive_prefix(original_id: str) -> str:
    """
    Grouping prefix for an original id.

    Everything before the last "-", provided that hyphen is not the first
    character; otherwise the whole id.

    Examples:
        "P1-03"     -> "P1"
        "WALL-A-12" -> "WALL-A"
        "-7"        -> "-7"
        "P1"        -> "P1"
    """
    last_dash = original_id.rfind("-")
    if last_dash > 0:
        return original_id[:last_dash]
    return original_id


def calculate_area(
    length: str,
    width: str,
    quantity: int,
    divisor: float = default_config.area_divisor,
) -> float:
    """
    Area of a merged row in square meters.

    Returns:
        length * width * quantity / divisor, or 0.0 if either dimension
        does not parse
    """
    length_mm = parse_dimension(length)
    width_mm = parse_dimension(width)
    if length_mm is None or width_mm is None:
        return 0.0
    return length_mm * width_mm * quantity / divisor


def build_report(items: Iterable[RenamedItem], config: Optional[Config] = None) -> PanelReport:
    """
    Group, merge and total renamed items.

    Args:
        items: Renamed items in host order
        config: Optional config (uses default_config if None)

    Returns:
        PanelReport with groups sorted by prefix (ordinal comparison)
    """
    config = config or default_config

    # prefix -> new_name -> row; dicts keep first-seen order
    grouped: Dict[str, Dict[str, MergedRow]] = {}
    for item in items:
        rows = grouped.setdefault(derive_prefix(item.original_id), {})
        row = rows.get(item.new_name)
        if row is None:
            rows[item.new_name] = MergedRow(
                name=item.new_name,
                length=item.length,
                width=item.width,
                quantity=1,
            )
        else:
            row.quantity += 1

    groups: List[ReportGroup] = []
    for prefix in sorted(grouped):
        rows = list(grouped[prefix].values())
        for row in rows:
            row.area = calculate_area(row.length, row.width, row.quantity, config.area_divisor)
        groups.append(ReportGroup(prefix=prefix, rows=rows))

    report = PanelReport(groups=groups)
    logger.info(
        "Report built: %d group(s), %d row(s), total area %.2f",
        len(groups),
        sum(len(g.rows) for g in groups),
        report.grand_total,
    )
    return report
