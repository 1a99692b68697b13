"""Monetary string parsing.

Cost breakdowns arrive as loosely formatted text from spreadsheet imports
("$1,234,567", "(500)", " 12.5 "). parse_money is the single adapter that
turns them into floats; it never raises and never returns NaN.
"""

import math
import re
from decimal import Decimal
from typing import Any

_FORMATTING_CHARS = re.compile(r"[$,\s()]")
_NON_NUMERIC_CHARS = re.compile(r"[^\d.\-]")
_LEADING_NUMBER = re.compile(r"^-?(\d+\.?\d*|\.\d+)")


def parse_money(value: Any) -> float:
    """Parse a monetary value into a signed float.

    Args:
        value: String such as "$1,234.50" or "(500)", a number, or None.

    Returns:
        The parsed amount, or 0.0 when the value is empty or unparseable.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    text = str(value).strip()
    if not text:
        return 0.0

    # Accounting notation: the whole value wrapped in parentheses
    is_negative = len(text) >= 2 and text.startswith("(") and text.endswith(")")

    cleaned = _NON_NUMERIC_CHARS.sub("", _FORMATTING_CHARS.sub("", text))

    # Same prefix rule as a float parse of loose text: "12.5.3" -> 12.5
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    number = float(match.group(0))
    if not math.isfinite(number):
        return 0.0

    return -abs(number) if is_negative else number
