"""Display formatting for cost figures.

The calculation services return plain numbers; these helpers turn them into
the strings shown in tables and CSV exports.
"""

import math
from typing import Any, Union

from services.square_footage import ProjectLike, resolve_total_sqft


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _to_float(amount: Union[int, float, str, None]) -> float:
    if isinstance(amount, str):
        try:
            return float(amount)
        except ValueError:
            return math.nan
    if amount is None:
        return math.nan
    return float(amount)


def format_currency(amount: Any) -> str:
    """Format an amount as US dollars: "$1,234", "$1,234.5", "-$500".

    Up to two decimal places are kept, trailing zeros dropped.
    Unparseable input renders as "$0".
    """
    number = _to_float(amount)
    if math.isnan(number) or math.isinf(number):
        return "$0"

    text = f"{abs(number):,.2f}".rstrip("0").rstrip(".")
    sign = "-" if number < 0 and text != "0" else ""
    return f"{sign}${text}"


def format_accounting(amount: Any) -> str:
    """Format an amount with negatives in parentheses: "($500)"."""
    number = _to_float(amount)
    if math.isnan(number) or math.isinf(number):
        return "$0"
    if number < 0:
        return f"({format_currency(abs(number))})"
    return format_currency(number)


def format_cost_per_sf(cost: float, project: ProjectLike) -> str:
    """Format a cost as whole dollars per square foot of the project."""
    total_sq_ft = resolve_total_sqft(project)
    if total_sq_ft == 0:
        return "$0"
    return f"${round_half_up(cost / total_sq_ft)}"
