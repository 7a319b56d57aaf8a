"""
Configuration file grammar: line scanning and value literals.
"""

from .literals import Value, parse_value, values_equal
from .scanner import LineKind, ScannedLine, scan_line

__all__ = [
    "LineKind",
    "ScannedLine",
    "Value",
    "parse_value",
    "scan_line",
    "values_equal",
]
