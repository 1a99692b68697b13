"""Floor plan library.

Static layouts for 12, 14, 15, 19 and 21 units per floor, each with a 2D
plan and 3- and 4-story building renderings.
"""

from dataclasses import dataclass
from typing import Dict, List

from utils.formatting import round_half_up


@dataclass(frozen=True)
class FloorPlanOption:
    """A standard floor plate layout and its rendering assets."""
    units_per_floor: int
    floor_plan_2d: str
    building_3_story: str
    building_4_story: str
    description: str


FLOOR_PLAN_OPTIONS: List[FloorPlanOption] = [
    FloorPlanOption(12, "plans/12.png", "renderings/3-12.png", "renderings/4-12.png", "Compact 12-unit floor plan"),
    FloorPlanOption(14, "plans/14.png", "renderings/3-14.png", "renderings/4-14.png", "14-unit floor plan"),
    FloorPlanOption(15, "plans/15.png", "renderings/3-15.png", "renderings/4-15.png", "15-unit floor plan"),
    FloorPlanOption(19, "plans/19.png", "renderings/3-19.png", "renderings/4-19.png", "Extended 19-unit floor plan"),
    FloorPlanOption(21, "plans/21.png", "renderings/3-21.png", "renderings/4-21.png", "Large 21-unit floor plan"),
]

UNIT_PLANS: Dict[str, str] = {
    "studio": "units/studio.png",
    "oneBed": "units/one_bedroom.png",
    "twoBed": "units/two_bedroom.png",
    "threeBed": "units/three_bedroom.png",
}


def calculate_units_per_floor(total_units: int, stories: int) -> int:
    """Average units per floor, rounded; 0 when there are no stories."""
    if stories <= 0:
        return 0
    return round_half_up(total_units / stories)


def select_floor_plan(target_units_per_floor: int) -> FloorPlanOption:
    """Select the option closest to the target; ties go to the smaller layout."""
    closest = FLOOR_PLAN_OPTIONS[0]
    min_diff = abs(target_units_per_floor - closest.units_per_floor)

    for option in FLOOR_PLAN_OPTIONS:
        diff = abs(target_units_per_floor - option.units_per_floor)
        if diff < min_diff:
            min_diff = diff
            closest = option

    return closest


def building_rendering(floor_plan: FloorPlanOption, stories: int) -> str:
    """Rendering for the given height; anything but 4 stories uses the 3-story view."""
    if stories == 4:
        return floor_plan.building_4_story
    return floor_plan.building_3_story
