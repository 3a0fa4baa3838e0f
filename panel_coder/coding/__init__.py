"""Code assignment: dimension values to short deterministic codes."""

from .normalizer import parse_dimension, normalize_dimension
from .codes import CodeTable, to_column_letters
from .engine import CodeAssigner, assign_codes

__all__ = [
    "parse_dimension",
    "normalize_dimension",
    "CodeTable",
    "to_column_letters",
    "CodeAssigner",
    "assign_codes",
]
