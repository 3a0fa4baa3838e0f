"""CSV serialization of a PanelReport.

Layout, one block per group with a blank line between blocks:

    P1
    NAME,Length,Width,Quantity,Area
    P1-1-A,500,300,2,0.30
    ,,,,0.30

    P2
    NAME,Length,Width,Quantity,Area
    P2-2-A,600,300,1,0.18
    ,,,,0.18

    Total,,,,0.48

Areas are written with exactly two decimals using Python's fixed-point
formatting, which rounds the exact binary value of the double.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..config import Config, default_config
from ..models.report import PanelReport

logger = logging.getLogger(__name__)


def escape_csv(value: str) -> str:
    """Quote a field if it contains a comma, double quote or newline."""
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_area(value: float) -> str:
    """Fixed-point area with two decimals."""
    return f"{value:.2f}"


def render_csv(report: PanelReport, config: Optional[Config] = None) -> str:
    """
    Render the report as CSV text.

    Args:
        report: Built report
        config: Optional config (uses default_config if None)

    Returns:
        CSV text with "\\n" line endings
    """
    config = config or default_config
    header = ",".join(config.csv_columns)
    lines: List[str] = []

    for index, group in enumerate(report.groups):
        if index > 0:
            lines.append("")
        lines.append(escape_csv(group.prefix))
        lines.append(header)
        for row in group.rows:
            lines.append(",".join([
                escape_csv(row.name),
                escape_csv(row.length),
                escape_csv(row.width),
                str(row.quantity),
                format_area(row.area),
            ]))
        lines.append(f",,,,{format_area(group.subtotal)}")

    lines.append("")
    lines.append(f"Total,,,,{format_area(report.grand_total)}")
    return "\n".join(lines) + "\n"


def write_report(
    report: PanelReport,
    path: Union[str, Path],
    config: Optional[Config] = None,
) -> Path:
    """
    Write the report CSV to path, creating parent directories.

    Returns:
        The path written
    """
    config = config or default_config
    path = Path(path)
    if path.parent and not path.parent.exists():
        os.makedirs(path.parent, exist_ok=True)

    with open(path, "w", encoding=config.encoding, newline="") as f:
        f.write(render_csv(report, config))

    logger.info("CSV exported to: %s", path)
    return path


def default_report_path(drawing_path: Union[str, Path], config: Optional[Config] = None) -> Path:
    """
    Report path next to the drawing: <dir>/<stem>_Panels.csv.

    Example:
        default_report_path("C:/jobs/house.dwg")  # C:/jobs/house_Panels.csv
    """
    config = config or default_config
    drawing_path = Path(drawing_path)
    return drawing_path.with_name(
        f"{drawing_path.stem}{config.report_suffix}{config.report_extension}"
    )
