"""Workflow stage gating.

Projects progress ModularFeasibility -> SmartStart -> FabAssure ->
EasyDesign. A stage opens once the previous stage's completion flag is set
on the project record.
"""

from typing import List, Optional

import structlog

from config.errors import ErrorCode, WorkflowError
from models.project import Project
from models.workflow import StageState, StageStatus, WorkflowProgress, WorkflowStage
from services.square_footage import ProjectLike, as_project

logger = structlog.get_logger()


STAGE_ORDER: List[WorkflowStage] = [
    WorkflowStage.MODULAR_FEASIBILITY,
    WorkflowStage.SMART_START,
    WorkflowStage.FAB_ASSURE,
    WorkflowStage.EASY_DESIGN,
]

# Sample projects are showcased mid-way through these stages
SAMPLE_IN_PROGRESS_STAGES = frozenset({WorkflowStage.FAB_ASSURE, WorkflowStage.EASY_DESIGN})


def previous_stage(stage: WorkflowStage) -> Optional[WorkflowStage]:
    """The stage that must be completed before this one, if any."""
    index = STAGE_ORDER.index(stage)
    return STAGE_ORDER[index - 1] if index > 0 else None


def is_stage_complete(project: ProjectLike, stage: WorkflowStage) -> bool:
    return bool(getattr(as_project(project), stage.completed_field))


def is_stage_available(project: ProjectLike, stage: WorkflowStage) -> bool:
    """A stage is available when its predecessor is complete (the first always is)."""
    prerequisite = previous_stage(stage)
    return prerequisite is None or is_stage_complete(project, prerequisite)


def stage_status(project: ProjectLike, stage: WorkflowStage) -> StageStatus:
    """Status of a stage for a project."""
    project = as_project(project)

    if project.is_sample and stage in SAMPLE_IN_PROGRESS_STAGES:
        return StageStatus.IN_PROGRESS
    if is_stage_complete(project, stage):
        return StageStatus.COMPLETED
    if is_stage_available(project, stage):
        return StageStatus.AVAILABLE
    return StageStatus.LOCKED


def workflow_progress(project: ProjectLike) -> WorkflowProgress:
    """Summarize a project's progress through the four stages."""
    project = as_project(project)

    states = [
        StageState(stage=stage, status=stage_status(project, stage), description=stage.description)
        for stage in STAGE_ORDER
    ]
    completed = sum(1 for state in states if state.status == StageStatus.COMPLETED)

    next_stage = next(
        (
            state.stage for state in states
            if state.status in (StageStatus.AVAILABLE, StageStatus.IN_PROGRESS)
        ),
        None,
    )

    return WorkflowProgress(
        stages=states,
        completed_count=completed,
        total_count=len(STAGE_ORDER),
        percent_complete=completed / len(STAGE_ORDER) * 100,
        next_stage=next_stage,
    )


def complete_stage(project: ProjectLike, stage: WorkflowStage) -> Project:
    """Mark a stage complete, returning an updated copy of the project.

    Raises:
        WorkflowError: If the stage is still locked.
    """
    project = as_project(project)

    if not is_stage_available(project, stage):
        prerequisite = previous_stage(stage)
        logger.warning(
            "workflow_stage_locked",
            project_id=project.id,
            stage=stage.value,
            requires=prerequisite.value if prerequisite else None,
        )
        raise WorkflowError(
            code=ErrorCode.STAGE_LOCKED,
            message=f"Complete {prerequisite.value} before {stage.value}",
            stage=stage.value,
            project_id=str(project.id) if project.id is not None else None,
            details={"requires": prerequisite.value if prerequisite else None},
        )

    updated = project.model_copy(update={stage.completed_field: True})

    logger.info("workflow_stage_completed", project_id=project.id, stage=stage.value)
    return updated


def parse_stage(value: str) -> WorkflowStage:
    """Look up a stage by name ("SmartStart") or slug ("smart-start").

    Raises:
        WorkflowError: If no stage matches.
    """
    for stage in STAGE_ORDER:
        if value in (stage.value, stage.slug):
            return stage
    raise WorkflowError(
        code=ErrorCode.UNKNOWN_STAGE,
        message=f"Unknown workflow stage: {value}",
        stage=value,
    )
