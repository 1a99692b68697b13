"""MasterFormat breakdown report models."""

from typing import List

from pydantic import BaseModel, Field


class BreakdownRow(BaseModel):
    """One row of the comparison table: a division, a section subtotal or the project total."""

    label: str
    site_built: float = 0.0
    raap_gc: float = 0.0
    raap_fab: float = 0.0
    modular_total: float = 0.0
    site_built_per_sf: float = 0.0
    modular_per_sf: float = 0.0
    savings: float = 0.0


class BreakdownSection(BaseModel):
    """A MasterFormat section (e.g. 'Concrete & Structure') with its divisions."""

    name: str
    rows: List[BreakdownRow] = Field(default_factory=list)
    subtotal: BreakdownRow


class BreakdownReport(BaseModel):
    """Sectioned MasterFormat rollup for a project."""

    sections: List[BreakdownSection] = Field(default_factory=list)
    project_total: BreakdownRow
    total_sq_ft: int = 0

    def section(self, name: str) -> BreakdownSection:
        """Get a section by name.

        Raises:
            KeyError: If the report has no such section.
        """
        for section in self.sections:
            if section.name == name:
                return section
        raise KeyError(name)
