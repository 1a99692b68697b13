"""Workflow stage models.

A project moves through four applications in a fixed order. Each stage
records its completion as a boolean flag on the project record.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class WorkflowStage(str, Enum):
    """The four applications, in workflow order."""

    MODULAR_FEASIBILITY = "ModularFeasibility"
    SMART_START = "SmartStart"
    FAB_ASSURE = "FabAssure"
    EASY_DESIGN = "EasyDesign"

    @property
    def completed_field(self) -> str:
        """Name of the Project attribute holding this stage's completion flag."""
        return _COMPLETED_FIELDS[self]

    @property
    def slug(self) -> str:
        """Route slug, e.g. 'smart-start'."""
        return _SLUGS[self]

    @property
    def description(self) -> str:
        """One-line summary shown on the stage card."""
        return _DESCRIPTIONS[self]


_COMPLETED_FIELDS = {
    WorkflowStage.MODULAR_FEASIBILITY: "modular_feasibility_complete",
    WorkflowStage.SMART_START: "smart_start_complete",
    WorkflowStage.FAB_ASSURE: "fab_assure_complete",
    WorkflowStage.EASY_DESIGN: "easy_design_complete",
}

_SLUGS = {
    WorkflowStage.MODULAR_FEASIBILITY: "modular-feasibility",
    WorkflowStage.SMART_START: "smart-start",
    WorkflowStage.FAB_ASSURE: "fab-assure",
    WorkflowStage.EASY_DESIGN: "easy-design",
}

_DESCRIPTIONS = {
    WorkflowStage.MODULAR_FEASIBILITY: "Assess project suitability for modular construction across 6 key criteria",
    WorkflowStage.SMART_START: "Navigate entitlements, permitting, and preliminary design development",
    WorkflowStage.FAB_ASSURE: "Coordinate factory production, quality assurance, and logistics planning",
    WorkflowStage.EASY_DESIGN: "Finalize architectural plans, interior design, and material selections",
}


class StageStatus(str, Enum):
    """Status of a stage for a given project."""

    COMPLETED = "completed"
    AVAILABLE = "available"
    IN_PROGRESS = "in_progress"
    LOCKED = "locked"


class StageState(BaseModel):
    """A stage together with its current status."""

    stage: WorkflowStage
    status: StageStatus
    description: str = ""


class WorkflowProgress(BaseModel):
    """Overall progress through the four stages."""

    stages: List[StageState] = Field(default_factory=list)
    completed_count: int = 0
    total_count: int = 0
    percent_complete: float = 0.0
    next_stage: Optional[WorkflowStage] = None
