"""Cost comparison logger.

Prints banner-framed summaries of cost totals, breakdown reports and
feasibility scores that stand out in console output, and mirrors each one
as a structured log event.
"""

from datetime import datetime, timezone

import structlog

from models.breakdown_report import BreakdownReport
from models.cost_totals import CostTotals
from models.feasibility import FeasibilityAssessment
from utils.formatting import format_accounting, format_currency, round_half_up

logger = structlog.get_logger()

# Visual markers for different log types
BANNER_WIDTH = 80
TOTALS_BANNER_CHAR = "═"
REPORT_BANNER_CHAR = "─"
SCORES_BANNER_CHAR = "░"


def _create_banner(char: str, text: str, width: int = BANNER_WIDTH) -> str:
    """Create a centered banner with given character."""
    text_with_spaces = f" {text} "
    padding = (width - len(text_with_spaces)) // 2
    return char * padding + text_with_spaces + char * (width - padding - len(text_with_spaces))


def log_cost_totals(project_name: str, totals: CostTotals) -> None:
    """Log a site-built vs. modular comparison with prominent banner."""
    timestamp = datetime.now(timezone.utc).isoformat()

    print("\n")
    print(TOTALS_BANNER_CHAR * BANNER_WIDTH)
    print(_create_banner(TOTALS_BANNER_CHAR, f"COST COMPARISON: {project_name.upper() or 'UNNAMED PROJECT'}"))
    print(TOTALS_BANNER_CHAR * BANNER_WIDTH)
    print(f"║ Timestamp      : {timestamp}")
    print(f"║ Units          : {totals.total_units:,}")
    print(f"║ Square Feet    : {totals.total_sq_ft:,}")
    print(TOTALS_BANNER_CHAR * BANNER_WIDTH)
    print(f"║ Site Built     : {format_currency(totals.site_built_total)}"
          f" (${round_half_up(totals.site_built_cost_per_sf)}/sf;"
          f" {format_currency(round_half_up(totals.site_built_cost_per_unit))}/unit)")
    print(f"║ Modular        : {format_currency(totals.modular_total)}"
          f" (${round_half_up(totals.modular_cost_per_sf)}/sf;"
          f" {format_currency(round_half_up(totals.modular_cost_per_unit))}/unit)")
    print(f"║ Savings        : {format_accounting(totals.savings)} ({totals.cost_savings_percent:.2f}%)")
    print(TOTALS_BANNER_CHAR * BANNER_WIDTH)
    print("\n")

    logger.info(
        "cost_totals_logged",
        project_name=project_name,
        site_built_total=totals.site_built_total,
        modular_total=totals.modular_total,
        savings=totals.savings,
        cost_savings_percent=round(totals.cost_savings_percent, 2)
    )


def log_breakdown_report(report: BreakdownReport) -> None:
    """Log section subtotals of a MasterFormat breakdown report."""
    print(REPORT_BANNER_CHAR * BANNER_WIDTH)
    print(_create_banner(REPORT_BANNER_CHAR, "MASTERFORMAT BREAKDOWN"))
    print(REPORT_BANNER_CHAR * BANNER_WIDTH)

    for section in report.sections:
        subtotal = section.subtotal
        print(f"│ {section.name:<28} {format_currency(subtotal.site_built):>16}"
              f" {format_currency(subtotal.modular_total):>16} {format_accounting(subtotal.savings):>14}")
        for row in section.rows:
            print(f"│   {row.label:<26} {format_currency(row.site_built):>16}"
                  f" {format_currency(row.modular_total):>16}")

    total = report.project_total
    print(REPORT_BANNER_CHAR * BANNER_WIDTH)
    print(f"│ {total.label:<28} {format_currency(total.site_built):>16}"
          f" {format_currency(total.modular_total):>16} {format_accounting(total.savings):>14}")
    print(REPORT_BANNER_CHAR * BANNER_WIDTH)
    print("\n")

    logger.info(
        "breakdown_report_logged",
        section_count=len(report.sections),
        site_built_total=total.site_built,
        modular_total=total.modular_total
    )


def log_feasibility_scores(project_name: str, assessment: FeasibilityAssessment) -> None:
    """Log feasibility criterion scores and the weighted overall score."""
    print(SCORES_BANNER_CHAR * BANNER_WIDTH)
    print(_create_banner(SCORES_BANNER_CHAR, f"FEASIBILITY: {assessment.overall_score:.1f}/5"))
    print(SCORES_BANNER_CHAR * BANNER_WIDTH)
    for entry in assessment.scores:
        print(f"░ {entry.criterion.value:<16}: {entry.score:.1f} (weight: {entry.weight:.0%})")
        print(f"░   {entry.justification}")
    print(SCORES_BANNER_CHAR * BANNER_WIDTH)
    print("\n")

    logger.info(
        "feasibility_scores_logged",
        project_name=project_name,
        overall_score=assessment.overall_score
    )
