"""Utility modules."""

from .io import load_json_robust

__all__ = [
    "load_json_robust",
]
