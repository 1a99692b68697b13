"""CostTotals value object.

The derived, never-persisted comparison between site-built and modular
cost for one project.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class CostTotals(BaseModel):
    """Aggregated site-built vs. modular totals with per-sf and per-unit metrics.

    Always fully populated; every field is a plain number.
    """

    site_built_total: float = Field(0.0, alias="siteBuiltTotal")
    modular_total: float = Field(0.0, alias="modularTotal")
    savings: float = Field(0.0, description="site_built_total - modular_total")
    cost_savings_percent: float = Field(0.0, alias="costSavingsPercent")
    modular_cost_per_sf: float = Field(0.0, alias="modularCostPerSf")
    site_built_cost_per_sf: float = Field(0.0, alias="siteBuiltCostPerSf")
    modular_cost_per_unit: float = Field(0.0, alias="modularCostPerUnit")
    site_built_cost_per_unit: float = Field(0.0, alias="siteBuiltCostPerUnit")
    total_sq_ft: int = Field(0, alias="totalSqFt")
    total_units: int = Field(0, alias="totalUnits")

    class Config:
        populate_by_name = True
        frozen = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to camelCase dictionary for JSON serialization."""
        return self.model_dump(by_alias=True)
