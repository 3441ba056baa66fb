"""Utility modules for the StarkEx client."""

from .numeric import parse_decimal, exact_multiply, decimal_to_str
from .structured_logging import CredentialRedactionFilter

__all__ = [
    "parse_decimal",
    "exact_multiply",
    "decimal_to_str",
    "CredentialRedactionFilter",
]
