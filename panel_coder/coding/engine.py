"""Code assignment engine.

Turns candidates into renamed items:

    Candidate("P1-03", "1200", "500")  ->  RenamedItem(new_name="P1-03-1-A")

Length codes are sequential integers starting at 1. Width codes are
sequential indexes starting at 0 rendered as column letters (A, B, ...,
Z, AA, ...). Both tables are keyed on the normalized dimension, so the
numbering depends on the order candidates are presented in. Each run
must start from a fresh CodeAssigner.
"""

import logging
from typing import Iterable, List, Tuple

from ..models.candidate import Candidate, RenamedItem
from .codes import CodeTable, to_column_letters
from .normalizer import normalize_dimension

logger = logging.getLogger(__name__)


class CodeAssigner:
    """
    Accumulator owning the length and width code tables for one run.

    Usage:
        assigner = CodeAssigner()
        items = assigner.assign(candidates)
        assigner.length_table.as_dict()  # {"1200": 1, "600": 2}
    """

    def __init__(self):
        self.length_table = CodeTable(start=1)
        self.width_table = CodeTable(start=0)

    def length_code(self, normalized: str) -> str:
        """Decimal code for a normalized length."""
        return str(self._lookup(self.length_table, normalized, "length"))

    def width_code(self, normalized: str) -> str:
        """Letter code for a normalized width."""
        return to_column_letters(self._lookup(self.width_table, normalized, "width"))

    def _lookup(self, table: CodeTable, value: str, kind: str) -> int:
        is_new = value not in table
        code = table.code_for(value)
        if is_new:
            logger.debug("New %s code %d for %r", kind, code, value)
        return code

    def rename(self, candidate: Candidate) -> RenamedItem:
        """Assign codes to one candidate and build its new name."""
        length = normalize_dimension(candidate.length_raw)
        width = normalize_dimension(candidate.width_raw)

        new_name = (
            f"{candidate.original_id}-{self.length_code(length)}-{self.width_code(width)}"
        )

        return RenamedItem(
            original_id=candidate.original_id,
            new_name=new_name,
            length=length,
            width=width,
            ref=candidate.handle,
        )

    def assign(self, candidates: Iterable[Candidate]) -> List[RenamedItem]:
        """Rename every candidate, preserving order."""
        return [self.rename(c) for c in candidates]


def assign_codes(candidates: Iterable[Candidate]) -> Tuple[List[RenamedItem], CodeAssigner]:
    """
    Run code assignment with fresh tables.

    Args:
        candidates: Candidates in host order

    Returns:
        Tuple of (renamed items, assigner holding the final tables)
    """
    assigner = CodeAssigner()
    items = assigner.assign(candidates)
    logger.info(
        "Assigned codes to %d item(s): %d length code(s), %d width code(s)",
        len(items),
        len(assigner.length_table),
        len(assigner.width_table),
    )
    return items, assigner
