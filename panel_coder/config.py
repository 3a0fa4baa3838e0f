"""
Configuration for the panel coder.

All settings centralized here. Override by creating a Config instance
with custom values.

Usage:
    from panel_coder.config import Config, default_config

    # Use defaults
    print(default_config.target_block_name)  # Panel

    # Override for a run
    my_config = Config(target_block_name="Door", report_suffix="_Doors")
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Config:
    """
    Central configuration for a naming run.

    Defaults match the block layout used in the production drawings.
    Create a new instance to override any setting.
    """

    # === Block selection ===
    target_block_name: str = "Panel"  # Compared case-insensitively

    # === Block properties ===
    name_tag: str = "NAME"            # Attribute holding the original id
    length_property: str = "Length"   # Dynamic property, millimeters
    width_property: str = "Width"     # Dynamic property, millimeters

    # === Report ===
    report_suffix: str = "_Panels"
    report_extension: str = ".csv"
    area_divisor: float = 1_000_000.0  # mm^2 -> m^2
    csv_columns: List[str] = field(
        default_factory=lambda: ["NAME", "Length", "Width", "Quantity", "Area"]
    )
    encoding: str = "utf-8"


# Default configuration instance
default_config = Config()
