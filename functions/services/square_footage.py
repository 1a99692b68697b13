"""Square-footage resolution for cost-per-square-foot figures.

Every per-sf number in the package comes from resolve_total_sqft, so the
comparison table, the totals card and the CSV export always agree.

Priority:
1. Building dimensions on the project ("146' X 66'" -> 9636)
2. Unit count x average unit size (settings.average_unit_sqft)
3. Fixed building default (settings.default_building_sqft)
"""

import re
from typing import Any, Mapping, Optional, Union

from config.settings import settings
from models.project import Project

_DIMENSIONS_PATTERN = re.compile(r"(\d+)'?\s*[xX×]\s*(\d+)'")

ProjectLike = Union[Project, Mapping[str, Any], None]


def as_project(project: ProjectLike) -> Project:
    """Coerce a Project, a raw record dict, or None into a Project."""
    if isinstance(project, Project):
        return project
    if project is None:
        return Project()
    return Project.model_validate(dict(project))


def count_total_units(project: ProjectLike) -> int:
    """Sum the four unit counts, treating missing values as 0."""
    return as_project(project).total_units


def parse_building_dimensions(dimensions: Optional[str]) -> Optional[int]:
    """Parse a "<width>' x <depth>'" footprint into square feet.

    Returns:
        width x depth, or None if the text does not match.
    """
    if not dimensions:
        return None
    match = _DIMENSIONS_PATTERN.search(dimensions)
    if not match:
        return None
    return int(match.group(1)) * int(match.group(2))


def resolve_total_sqft(project: ProjectLike, total_units: Optional[int] = None) -> int:
    """Resolve total building square footage from the best available signal.

    Args:
        project: Project record (model or dict).
        total_units: Precomputed unit total; derived from the project if omitted.

    Returns:
        Total square feet.
    """
    project = as_project(project)

    from_dimensions = parse_building_dimensions(project.building_dimensions)
    if from_dimensions is not None:
        return from_dimensions

    if total_units is None:
        total_units = project.total_units
    if total_units > 0:
        return total_units * settings.average_unit_sqft

    return settings.default_building_sqft
