"""Code tables and the spreadsheet-column letter encoding."""

import string
from typing import Dict, Iterator, Tuple


LETTERS = string.ascii_uppercase


def to_column_letters(index: int) -> str:
    """
    Encode a zero-based index as bijective base-26 letters.

    Same scheme as spreadsheet columns: 0 -> "A", 25 -> "Z", 26 -> "AA",
    701 -> "ZZ", 702 -> "AAA". Injective over all non-negative integers.

    Raises:
        ValueError: If index is negative
    """
    if index < 0:
        raise ValueError(f"Column index must be non-negative, got {index}")

    letters = []
    remaining = index
    while remaining >= 0:
        letters.append(LETTERS[remaining % 26])
        remaining = remaining // 26 - 1
    return "".join(reversed(letters))


class CodeTable:
    """
    First-seen index assignment for normalized dimension values.

    The first new value receives ``start``, the next ``start + 1`` and so
    on. Values are never removed, so an assigned index never changes
    within a run.

    Usage:
        table = CodeTable(start=1)
        table.code_for("1200")  # 1
        table.code_for("600")   # 2
        table.code_for("1200")  # 1
    """

    def __init__(self, start: int = 0):
        self.start = start
        self._codes: Dict[str, int] = {}

    def code_for(self, value: str) -> int:
        """Get the index for value, assigning the next one if unseen."""
        code = self._codes.get(value)
        if code is None:
            code = self.start + len(self._codes)
            self._codes[value] = code
        return code

    def as_dict(self) -> Dict[str, int]:
        """Snapshot of the table in assignment order."""
        return dict(self._codes)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._codes.items())

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, value: str) -> bool:
        return value in self._codes

    def __repr__(self) -> str:
        return f"CodeTable(start={self.start}, size={len(self._codes)})"
