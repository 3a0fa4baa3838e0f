"""Candidate and renamed item models."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Candidate:
    """
    One drawing component instance submitted for coding.

    Produced by a CandidateSource; read-only input to the coding engine.

    Attributes:
        original_id: Value of the block's name attribute (may be empty)
        length_raw: Length exactly as the host reported it
        width_raw: Width exactly as the host reported it
        ref: Opaque host handle passed back to apply_rename.
            Defaults to original_id when the source has no better handle.
    """

    original_id: str
    length_raw: str
    width_raw: str
    ref: Optional[str] = None

    @property
    def handle(self) -> str:
        """Handle used to write the new name back to the host."""
        return self.ref if self.ref is not None else self.original_id


@dataclass(frozen=True)
class RenamedItem:
    """
    A candidate after code assignment.

    Attributes:
        original_id: Id before renaming
        new_name: original_id + "-" + length code + "-" + width code
        length: Normalized length string
        width: Normalized width string
        ref: Host handle carried over from the candidate
    """

    original_id: str
    new_name: str
    length: str
    width: str
    ref: Optional[str] = None
