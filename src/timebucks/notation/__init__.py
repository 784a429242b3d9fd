"""
TimeBucks Notation Module

Canonical text form of TimeBucks values: $8,000@2024[CPI:1970]
"""

from timebucks.notation.parser import NotationParser, parse, parse_raw, validate
from timebucks.notation.formatter import format_amount, format_date, format_notation

__all__ = [
    "NotationParser",
    "parse",
    "parse_raw",
    "validate",
    "format_amount",
    "format_date",
    "format_notation",
]
