"""In-memory candidate source."""

from typing import Dict, Iterable, List, Sequence

from ..models.candidate import Candidate


class InMemorySource:
    """
    Candidate source backed by a list, recording renames in a dict.

    Usage:
        source = InMemorySource([Candidate("P1", "500", "300", ref="h1")])
        run_naming(source)
        source.renames  # {"h1": "P1-1-A"}
    """

    def __init__(self, candidates: Iterable[Candidate], seen_block_names: Iterable[str] = ()):
        self.candidates: List[Candidate] = list(candidates)
        self.seen_block_names: List[str] = list(seen_block_names)
        self.renames: Dict[str, str] = {}

    def fetch_candidates(self) -> Sequence[Candidate]:
        return list(self.candidates)

    def apply_rename(self, ref: str, new_name: str) -> None:
        self.renames[ref] = new_name
