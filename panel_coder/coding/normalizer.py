"""Dimension normalization: raw property strings to integer lookup keys.

Dimension values arrive as whatever text the host produced for a dynamic
block property. They are parsed with a fixed, locale-independent grammar
(period decimal separator, no digit grouping) so that "1200.4" means the
same thing on every workstation.

Rounding is half-to-even (Python's built-in round), the same default the
drawing host uses:

    "2.5"  -> "2"
    "3.5"  -> "4"
    "1e3"  -> "1000"

Anything that does not parse is passed through untouched. "10" and "10.0"
therefore share a key, while "10 mm" and "10" do not.
"""

import math
import re
from typing import Optional


# Optional sign, digits with optional fraction (or a bare fraction),
# optional exponent. Surrounding whitespace is tolerated.
NUMBER_PATTERN = re.compile(
    r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$',
    re.ASCII,
)


def parse_dimension(raw: Optional[str]) -> Optional[float]:
    """
    Parse a dimension string as a float.

    Args:
        raw: Property text, e.g. "1200", "1199.6", " 5e2 "

    Returns:
        The value, or None if the text is not a finite number
    """
    if raw is None:
        return None
    if not NUMBER_PATTERN.match(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


def normalize_dimension(raw: str) -> str:
    """
    Round a dimension to the nearest integer and return it as text.

    Args:
        raw: Property text

    Returns:
        Integer string ("1200"), or raw unchanged if it does not parse
    """
    value = parse_dimension(raw)
    if value is None:
        return raw
    return str(round(value))
