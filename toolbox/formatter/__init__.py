"""
Formatter package: hex, number, boolean and date string conversions.
"""

from . import hex, number
from .boolean import FALSE_TOKENS, TRUE_TOKENS, parse_boolean, to_boolean
from .dates import from_iso8601, from_rfc2822, to_iso8601, to_rfc2822

__all__ = [
    "hex",
    "number",
    "FALSE_TOKENS",
    "TRUE_TOKENS",
    "parse_boolean",
    "to_boolean",
    "from_iso8601",
    "from_rfc2822",
    "to_iso8601",
    "to_rfc2822",
]
