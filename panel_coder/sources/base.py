"""Interface every drawing host adapter implements."""

from typing import List, Protocol, Sequence

from ..models.candidate import Candidate


class CandidateSource(Protocol):
    """
    Host adapter supplying candidates and receiving new names.

    Implementations own the host specifics such as block selection and
    attribute storage. The coder only sees Candidate values and hands
    back (ref, new_name) pairs.

    seen_block_names lists every block name the host came across while
    fetching, matching or not. It is only reported back to the user and
    may stay empty.
    """

    seen_block_names: List[str]

    def fetch_candidates(self) -> Sequence[Candidate]:
        """Candidates in host order."""
        ...

    def apply_rename(self, ref: str, new_name: str) -> None:
        """Write new_name to the object identified by ref."""
        ...
