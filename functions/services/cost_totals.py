"""Cost aggregation: site-built vs. modular totals.

This module is the one place cost totals are computed. Callers that need
totals, savings or per-sf / per-unit figures import calculate_cost_totals
rather than summing breakdown rows themselves.

Only leaf MasterFormat rows (category prefixed with two digits and a space,
e.g. "03 Concrete") are summed; rollup rows in the same list would otherwise
be counted twice.
"""

import re
from typing import Any, Iterable, List, Mapping, Optional, Union

import structlog

from models.cost_totals import CostTotals
from models.project import CostBreakdown
from services.money import parse_money
from services.square_footage import ProjectLike, as_project, resolve_total_sqft

logger = structlog.get_logger()

_LEAF_CATEGORY = re.compile(r"^\d{2}\s")

BreakdownLike = Union[CostBreakdown, Mapping[str, Any]]


def is_leaf_category(category: Optional[str]) -> bool:
    """Check whether a category is a leaf MasterFormat line item."""
    return bool(category) and bool(_LEAF_CATEGORY.match(category))


def as_cost_breakdowns(cost_breakdowns: Optional[Iterable[BreakdownLike]]) -> List[CostBreakdown]:
    """Coerce breakdown models or raw record dicts into CostBreakdown models."""
    if not cost_breakdowns:
        return []
    return [
        row if isinstance(row, CostBreakdown) else CostBreakdown.model_validate(dict(row))
        for row in cost_breakdowns
    ]


def leaf_breakdowns(cost_breakdowns: Optional[Iterable[BreakdownLike]]) -> List[CostBreakdown]:
    """Filter breakdown rows to leaf categories, keeping input order."""
    return [row for row in as_cost_breakdowns(cost_breakdowns) if is_leaf_category(row.category)]


def _safe_divide(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def calculate_cost_totals(
    project: ProjectLike,
    cost_breakdowns: Optional[Iterable[BreakdownLike]],
) -> CostTotals:
    """Calculate all cost metrics from MasterFormat breakdown data.

    Malformed monetary strings count as 0; division by a zero area or unit
    count yields 0. Inputs are never modified.

    Args:
        project: Project record (model or dict); None is treated as empty.
        cost_breakdowns: Breakdown rows (models or dicts); None is treated as empty.

    Returns:
        Fully populated CostTotals.
    """
    project = as_project(project)
    rows = as_cost_breakdowns(cost_breakdowns)

    total_units = project.total_units
    total_sq_ft = resolve_total_sqft(project, total_units)

    if not rows:
        return CostTotals(total_sq_ft=total_sq_ft, total_units=total_units)

    leaves = [row for row in rows if is_leaf_category(row.category)]

    site_built_total = sum(parse_money(row.site_built_cost) for row in leaves)
    modular_total = sum(parse_money(row.raap_total_cost) for row in leaves)

    savings = site_built_total - modular_total
    cost_savings_percent = (savings / site_built_total) * 100 if site_built_total > 0 else 0.0

    totals = CostTotals(
        site_built_total=site_built_total,
        modular_total=modular_total,
        savings=savings,
        cost_savings_percent=cost_savings_percent,
        modular_cost_per_sf=_safe_divide(modular_total, total_sq_ft),
        site_built_cost_per_sf=_safe_divide(site_built_total, total_sq_ft),
        modular_cost_per_unit=_safe_divide(modular_total, total_units),
        site_built_cost_per_unit=_safe_divide(site_built_total, total_units),
        total_sq_ft=total_sq_ft,
        total_units=total_units,
    )

    logger.debug(
        "cost_totals_calculated",
        project_id=project.id,
        row_count=len(rows),
        leaf_count=len(leaves),
        site_built_total=site_built_total,
        modular_total=modular_total,
        total_sq_ft=total_sq_ft,
    )

    return totals


def calculate_cost_per_sf(cost: float, project: ProjectLike) -> float:
    """Divide a cost by the project's resolved square footage (0 if none)."""
    return _safe_divide(cost, resolve_total_sqft(project))
