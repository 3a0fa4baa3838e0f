"""Candidate sources: the boundary between the coder and the drawing host."""

from .base import CandidateSource
from .memory import InMemorySource
from .json_export import JsonBlockSource

__all__ = [
    "CandidateSource",
    "InMemorySource",
    "JsonBlockSource",
]
