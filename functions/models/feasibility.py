"""Feasibility scoring models.

Six weighted criteria, each scored 1-5, rolled up into an overall score.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field


class Criterion(str, Enum):
    """Feasibility criteria assessed for every project."""

    ZONING = "zoning"
    MASSING = "massing"
    COST = "cost"
    SUSTAINABILITY = "sustainability"
    LOGISTICS = "logistics"
    BUILD_TIME = "buildTime"


CRITERION_WEIGHTS: Dict[Criterion, float] = {
    Criterion.ZONING: 0.20,
    Criterion.MASSING: 0.15,
    Criterion.COST: 0.20,
    Criterion.SUSTAINABILITY: 0.20,
    Criterion.LOGISTICS: 0.15,
    Criterion.BUILD_TIME: 0.10,
}


class CriterionScore(BaseModel):
    """Score and canned justification for one criterion."""

    criterion: Criterion
    score: float = Field(..., ge=1, le=5, description="Score on a 1-5 scale")
    justification: str = ""

    @property
    def weight(self) -> float:
        return CRITERION_WEIGHTS[self.criterion]


class FeasibilityAssessment(BaseModel):
    """Full feasibility assessment for a project."""

    scores: List[CriterionScore] = Field(default_factory=list)
    overall_score: float = Field(0.0, alias="overallScore")

    class Config:
        populate_by_name = True

    def score_for(self, criterion: Criterion) -> CriterionScore:
        """Get the score entry for a criterion.

        Raises:
            KeyError: If the criterion was not scored.
        """
        for entry in self.scores:
            if entry.criterion == criterion:
                return entry
        raise KeyError(criterion.value)

    def to_project_fields(self) -> Dict[str, str]:
        """Flatten into the persisted project columns (zoningScore, zoningJustification, ...)."""
        fields: Dict[str, str] = {}
        for entry in self.scores:
            fields[f"{entry.criterion.value}Score"] = f"{entry.score:.1f}"
            fields[f"{entry.criterion.value}Justification"] = entry.justification
        fields["overallScore"] = f"{self.overall_score:.1f}"
        return fields
