"""Naming run: fetch candidates, assign codes, write names back, report.

Usage:
    from panel_coder.pipeline import run_naming
    from panel_coder.sources import JsonBlockSource

    source = JsonBlockSource("house_blocks.json")
    result = run_naming(source, report_path="house_Panels.csv")

    for line in result.summary_lines():
        print(line)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import Config, default_config
from .coding.engine import assign_codes
from .models.candidate import RenamedItem
from .models.report import PanelReport
from .report.aggregate import build_report
from .report.csv_writer import write_report
from .sources.base import CandidateSource

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """
    Outcome of one naming run.

    Attributes:
        block_name: Target block name the run selected on
        items: Renamed items in host order
        report: Aggregated report (empty when nothing matched)
        report_path: CSV written, or None if no report was written
        length_codes: Final length table, normalized value -> code
        width_codes: Final width table, normalized value -> index
        seen_block_names: Block names the source encountered
    """
    block_name: str = ""
    items: List[RenamedItem] = field(default_factory=list)
    report: PanelReport = field(default_factory=PanelReport)
    report_path: Optional[Path] = None
    length_codes: Dict[str, int] = field(default_factory=dict)
    width_codes: Dict[str, int] = field(default_factory=dict)
    seen_block_names: List[str] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.items)

    def summary_lines(self) -> List[str]:
        """User-facing messages describing the run."""
        if not self.items:
            lines = [f"No blocks named '{self.block_name}' found in Model Space."]
            if self.seen_block_names:
                lines.append("Block names found in drawing: " + ", ".join(self.seen_block_names))
            else:
                lines.append("No block references found at all in Model Space.")
            return lines

        lines = [f"Success: {self.processed} '{self.block_name}' block(s) processed."]
        if self.report_path is not None:
            lines.append(f"CSV exported to: {self.report_path}")
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "blockName": self.block_name,
            "processed": self.processed,
            "reportPath": str(self.report_path) if self.report_path else None,
            "lengthCodes": self.length_codes,
            "widthCodes": self.width_codes,
            "grandTotal": self.report.grand_total,
            "report": self.report.to_dict(),
        }


def run_naming(
    source: CandidateSource,
    report_path: Optional[Union[str, Path]] = None,
    config: Optional[Config] = None,
    write_back: bool = True,
) -> RunResult:
    """
    Rename every candidate from source and build the area report.

    Args:
        source: Host adapter
        report_path: Where to write the CSV; None skips writing
        config: Optional config (uses default_config if None)
        write_back: Call source.apply_rename for each item

    Returns:
        RunResult. When the source yields no candidates, nothing is
        renamed and no CSV is written.
    """
    config = config or default_config
    candidates = list(source.fetch_candidates())
    result = RunResult(
        block_name=config.target_block_name,
        seen_block_names=list(source.seen_block_names),
    )

    if not candidates:
        logger.info("No blocks named '%s' found", config.target_block_name)
        return result

    items, assigner = assign_codes(candidates)

    if write_back:
        for item in items:
            source.apply_rename(item.ref, item.new_name)

    result.items = items
    result.length_codes = assigner.length_table.as_dict()
    result.width_codes = assigner.width_table.as_dict()
    result.report = build_report(items, config)

    if report_path is not None:
        result.report_path = write_report(result.report, report_path, config)

    return result
