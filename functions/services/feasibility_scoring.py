"""Feasibility scoring for modular construction.

Scores a project 1-5 on six weighted criteria:

    zoning 20%, massing 15%, cost 20%, sustainability 20%,
    logistics 15%, build time 10%

assess_feasibility applies the rule set used when a project is created or
updated. project_display_scores produces the figures shown on project cards:
stored scores for the showcase sample projects, and stable pseudo-random
scores for everything else.
"""

import zlib
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Mapping, Optional, Union

import structlog

from config.settings import settings
from models.feasibility import (
    CRITERION_WEIGHTS,
    Criterion,
    CriterionScore,
    FeasibilityAssessment,
)
from services.money import parse_money
from services.square_footage import ProjectLike, as_project

logger = structlog.get_logger()


HOTEL_PROJECT_TYPES = frozenset({"hotel", "hostel"})

STRONG_SCORE_THRESHOLD = 4.5
FAVOURABLE_SCORE_THRESHOLD = 3.5

DEFAULT_SAMPLE_SCORE = "4.0"

# Summation order of the weighted overall score (float addition is order dependent)
OVERALL_SUM_ORDER = (
    Criterion.ZONING,
    Criterion.MASSING,
    Criterion.SUSTAINABILITY,
    Criterion.COST,
    Criterion.LOGISTICS,
    Criterion.BUILD_TIME,
)

# Canned justifications by criterion: (strong, favourable, constrained)
JUSTIFICATIONS: Dict[Criterion, tuple] = {
    Criterion.ZONING: (
        "Project type is fully compatible with the zoning district; modular construction introduces no additional waivers.",
        "Zoning allows the project with minor concessions, such as reduced parking or open space requirements.",
        "Zoning constraints require waivers or variances before modular construction can proceed.",
    ),
    Criterion.MASSING: (
        "The target unit count and unit mix fit efficient, repetitive modular layouts.",
        "Unit configuration works for modular construction with some layout adjustments.",
        "No unit mix has been defined yet, so modular massing cannot be confirmed.",
    ),
    Criterion.COST: (
        "Modular construction is projected to cost less than site-built for this project type and scale.",
        "Modular cost is broadly in line with site-built construction.",
        "Modular cost advantages are limited for this project type; costs are comparable to or above site-built.",
    ),
    Criterion.SUSTAINABILITY: (
        "Factory construction reduces waste and aligns well with high-performance energy goals.",
        "Modular design supports energy efficiency goals with some envelope and systems enhancements.",
        "Sustainability goals will need significant enhancements beyond the standard modular package.",
    ),
    Criterion.LOGISTICS: (
        "Site has easy highway access and open space for module staging.",
        "Site access and staging are workable with some transportation planning.",
        "Transportation or staging constraints will add cost and schedule risk.",
    ),
    Criterion.BUILD_TIME: (
        "Parallel site and factory work yields substantial schedule savings over site-built.",
        "Modular delivery shortens the schedule moderately.",
        "Schedule savings are limited for this project.",
    ),
}


def select_justification(criterion: Criterion, score: float) -> str:
    """Choose the canned justification for a criterion by score band."""
    strong, favourable, constrained = JUSTIFICATIONS[criterion]
    if score >= STRONG_SCORE_THRESHOLD:
        return strong
    if score >= FAVOURABLE_SCORE_THRESHOLD:
        return favourable
    return constrained


def round_to_tenth(value: float) -> float:
    """Round to one decimal, halves up, on the exact binary value (4.75 -> 4.8)."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def weighted_overall_score(scores: Mapping[Union[Criterion, str], object]) -> float:
    """Weighted sum of criterion scores, rounded to one decimal.

    Args:
        scores: Score per criterion; values may be numbers or decimal strings.
            Missing or unparseable scores count as 0.

    Returns:
        Overall score on the 1-5 scale.
    """
    total = 0.0
    for criterion in OVERALL_SUM_ORDER:
        value = scores.get(criterion, scores.get(criterion.value))
        total += parse_money(value) * CRITERION_WEIGHTS[criterion]
    return round_to_tenth(total)


def _rule_scores(project_type: str, total_units: int) -> Dict[Criterion, float]:
    is_hotel = project_type.lower() in HOTEL_PROJECT_TYPES
    return {
        Criterion.ZONING: 5.0,
        Criterion.MASSING: 5.0 if total_units > 0 else 3.0,
        Criterion.COST: 3.0 if is_hotel else 5.0,
        Criterion.SUSTAINABILITY: 5.0,
        Criterion.LOGISTICS: 5.0 if is_hotel else 4.0,
        Criterion.BUILD_TIME: 5.0,
    }


def assess_feasibility(project: ProjectLike) -> FeasibilityAssessment:
    """Score a project on the six feasibility criteria.

    Args:
        project: Project record (model or dict).

    Returns:
        FeasibilityAssessment with per-criterion scores and justifications.
    """
    project = as_project(project)
    raw_scores = _rule_scores(project.project_type, project.total_units)

    entries = [
        CriterionScore(
            criterion=criterion,
            score=score,
            justification=select_justification(criterion, score),
        )
        for criterion, score in raw_scores.items()
    ]
    overall = weighted_overall_score(raw_scores)

    logger.info(
        "feasibility_assessed",
        project_id=project.id,
        project_type=project.project_type,
        overall_score=overall,
    )

    return FeasibilityAssessment(scores=entries, overall_score=overall)


# =============================================================================
# DISPLAY SCORES
# =============================================================================


def is_sample_project(project_name: Optional[str]) -> bool:
    """Check whether a project is one of the showcase sample projects."""
    return bool(project_name) and project_name in settings.sample_project_names


def _mulberry32(seed: int) -> Callable[[], float]:
    """Seeded 32-bit PRNG returning floats in [0, 1)."""
    state = seed & 0xFFFFFFFF

    def next_float() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & 0xFFFFFFFF
        t = state
        t = ((t ^ (t >> 15)) * (t | 1)) & 0xFFFFFFFF
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & 0xFFFFFFFF)) & 0xFFFFFFFF
        return ((t ^ (t >> 14)) & 0xFFFFFFFF) / 4294967296

    return next_float


def _create_seed(project_id: Union[int, str, None]) -> int:
    """Derive a PRNG seed from a project id (CRC-32 for non-numeric ids)."""
    if project_id is None:
        numeric_id = 0
    elif isinstance(project_id, int):
        numeric_id = project_id
    elif str(project_id).isdigit():
        numeric_id = int(project_id)
    else:
        numeric_id = zlib.crc32(str(project_id).encode("utf-8"))
    return abs(numeric_id * 31415927) % 2147483647


def _draw_score(rng: Callable[[], float]) -> str:
    return f"{round_to_tenth(rng() * 0.6 + 4.4):.1f}"


def generate_deterministic_score(project_id: Union[int, str, None]) -> str:
    """Stable score in [4.4, 5.0] for a project id, as a one-decimal string."""
    return _draw_score(_mulberry32(_create_seed(project_id)))


def project_display_scores(project: ProjectLike) -> Dict[str, object]:
    """Scores shown on project cards.

    Sample projects use their stored scores (falling back to "4.0"); other
    projects get deterministic scores seeded from their id.

    Returns:
        {"overall": "x.y", "individual": {criterion: "x.y", ...}}
    """
    project = as_project(project)

    if is_sample_project(project.name):
        individual = {
            Criterion.ZONING.value: project.zoning_score or DEFAULT_SAMPLE_SCORE,
            Criterion.MASSING.value: project.massing_score or DEFAULT_SAMPLE_SCORE,
            Criterion.SUSTAINABILITY.value: project.sustainability_score or DEFAULT_SAMPLE_SCORE,
            Criterion.COST.value: project.cost_score or DEFAULT_SAMPLE_SCORE,
            Criterion.LOGISTICS.value: project.logistics_score or DEFAULT_SAMPLE_SCORE,
            Criterion.BUILD_TIME.value: project.build_time_score or DEFAULT_SAMPLE_SCORE,
        }
    else:
        rng = _mulberry32(_create_seed(project.id))
        individual = {
            Criterion.ZONING.value: _draw_score(rng),
            Criterion.MASSING.value: _draw_score(rng),
            Criterion.SUSTAINABILITY.value: _draw_score(rng),
            Criterion.COST.value: _draw_score(rng),
            Criterion.LOGISTICS.value: _draw_score(rng),
            Criterion.BUILD_TIME.value: _draw_score(rng),
        }

    return {
        "overall": f"{weighted_overall_score(individual):.1f}",
        "individual": individual,
    }
