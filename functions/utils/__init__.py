"""Utility modules for the modular feasibility package."""

from utils.formatting import (
    format_accounting,
    format_cost_per_sf,
    format_currency,
    round_half_up,
)
from utils.report_logger import (
    log_breakdown_report,
    log_cost_totals,
    log_feasibility_scores,
)

__all__ = [
    "format_accounting",
    "format_cost_per_sf",
    "format_currency",
    "round_half_up",
    "log_breakdown_report",
    "log_cost_totals",
    "log_feasibility_scores",
]
