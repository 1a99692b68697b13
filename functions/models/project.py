"""Project and cost breakdown models.

Pydantic models for the records supplied by the persistence layer. Only the
fields read by the calculation core are modelled; anything else on the
record is ignored.
"""

from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


# Raw monetary value as stored: strings from spreadsheet import, or numbers
MoneyValue = Optional[Union[str, int, float, Decimal]]


def _coerce_count(value: Any) -> int:
    """Coerce a unit count to a non-negative int, defaulting to 0."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


_FALSE_FLAG_STRINGS = frozenset({"", "0", "false", "f", "no", "n", "off", "null", "none"})


def _coerce_flag(value: Any) -> bool:
    """Coerce a stored flag to bool; "false", "0", "no" and null are False."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_FLAG_STRINGS
    return bool(value)


def _coerce_id(value: Any) -> Optional[Union[str, int]]:
    """Keep str and int ids; integral floats become int, anything else str."""
    if value is None or (isinstance(value, (str, int)) and not isinstance(value, bool)):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return str(value)


class Project(BaseModel):
    """Project record as consumed by the cost and workflow services."""

    id: Optional[Union[str, int]] = Field(default=None, description="Project ID")
    name: str = Field(default="", description="Project name")
    project_type: str = Field(
        default="",
        alias="projectType",
        description="Project type (e.g. affordable, senior, hotel)"
    )
    target_floors: Optional[int] = Field(default=None, alias="targetFloors")

    # Unit mix
    studio_units: int = Field(default=0, alias="studioUnits")
    one_bed_units: int = Field(default=0, alias="oneBedUnits")
    two_bed_units: int = Field(default=0, alias="twoBedUnits")
    three_bed_units: int = Field(default=0, alias="threeBedUnits")

    building_dimensions: Optional[str] = Field(
        default=None,
        alias="buildingDimensions",
        description="Footprint such as \"146' X 66'\""
    )
    is_sample: bool = Field(default=False, alias="isSample")

    # Stored feasibility scores (decimal strings as persisted)
    zoning_score: Optional[str] = Field(default=None, alias="zoningScore")
    massing_score: Optional[str] = Field(default=None, alias="massingScore")
    cost_score: Optional[str] = Field(default=None, alias="costScore")
    sustainability_score: Optional[str] = Field(default=None, alias="sustainabilityScore")
    logistics_score: Optional[str] = Field(default=None, alias="logisticsScore")
    build_time_score: Optional[str] = Field(default=None, alias="buildTimeScore")

    # Workflow progress flags
    modular_feasibility_complete: bool = Field(default=False, alias="modularFeasibilityComplete")
    smart_start_complete: bool = Field(default=False, alias="smartStartComplete")
    fab_assure_complete: bool = Field(default=False, alias="fabAssureComplete")
    easy_design_complete: bool = Field(default=False, alias="easyDesignComplete")

    class Config:
        populate_by_name = True

    @field_validator(
        "studio_units", "one_bed_units", "two_bed_units", "three_bed_units",
        mode="before"
    )
    @classmethod
    def coerce_unit_counts(cls, v: Any) -> int:
        return _coerce_count(v)

    @field_validator("target_floors", mode="before")
    @classmethod
    def coerce_target_floors(cls, v: Any) -> Optional[int]:
        if v is None or v == "":
            return None
        return _coerce_count(v)

    @field_validator(
        "is_sample", "modular_feasibility_complete", "smart_start_complete",
        "fab_assure_complete", "easy_design_complete",
        mode="before"
    )
    @classmethod
    def coerce_flags(cls, v: Any) -> bool:
        return _coerce_flag(v)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Optional[Union[str, int]]:
        return _coerce_id(v)

    @field_validator(
        "zoning_score", "massing_score", "cost_score",
        "sustainability_score", "logistics_score", "build_time_score",
        mode="before"
    )
    @classmethod
    def coerce_scores(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v)

    @field_validator("name", "project_type", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("building_dimensions", mode="before")
    @classmethod
    def coerce_dimensions(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @property
    def total_units(self) -> int:
        """Total dwelling units across the unit mix."""
        return (
            self.studio_units + self.one_bed_units
            + self.two_bed_units + self.three_bed_units
        )


class CostBreakdown(BaseModel):
    """A single MasterFormat cost-breakdown line item.

    Monetary fields are kept raw; services.money.parse_money is the one
    place they are interpreted.
    """

    id: Optional[Union[str, int]] = Field(default=None)
    project_id: Optional[Union[str, int]] = Field(default=None, alias="projectId")
    category: str = Field(default="", description="MasterFormat category, e.g. '03 Concrete'")
    site_built_cost: MoneyValue = Field(default=None, alias="siteBuiltCost")
    raap_gc_cost: MoneyValue = Field(default=None, alias="raapGcCost")
    raap_fab_cost: MoneyValue = Field(default=None, alias="raapFabCost")
    raap_total_cost: MoneyValue = Field(default=None, alias="raapTotalCost")

    class Config:
        populate_by_name = True

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("id", "project_id", mode="before")
    @classmethod
    def coerce_ids(cls, v: Any) -> Optional[Union[str, int]]:
        return _coerce_id(v)

    @field_validator(
        "site_built_cost", "raap_gc_cost", "raap_fab_cost", "raap_total_cost",
        mode="before"
    )
    @classmethod
    def keep_raw_money(cls, v: Any) -> MoneyValue:
        # Anything that is not text or a number is unparseable; store as missing
        if v is None or isinstance(v, bool) or not isinstance(v, (str, int, float, Decimal)):
            return None
        return v
