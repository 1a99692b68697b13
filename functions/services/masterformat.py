"""MasterFormat breakdown rollup for the site-built vs. modular comparison.

Groups leaf cost-breakdown rows into MasterFormat sections, computes
section subtotals and the project total, and exports the table as CSV.
Section subtotals always sum to the project total, and the project total
matches calculate_cost_totals for the same rows.
"""

import csv
import io
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from models.breakdown_report import BreakdownReport, BreakdownRow, BreakdownSection
from models.project import CostBreakdown
from services.cost_totals import BreakdownLike, leaf_breakdowns
from services.money import parse_money
from services.square_footage import ProjectLike, resolve_total_sqft
from utils.formatting import format_accounting, format_currency, round_half_up

logger = structlog.get_logger()


OTHER_SECTION = "Other"
PROJECT_TOTAL_LABEL = "PROJECT TOTAL"

# Standard CSI MasterFormat divisions and their comparison-table sections
STANDARD_DIVISIONS: List[Tuple[str, str]] = [
    # General Requirements & Fees
    ("00 Procurement and Contracting Requirements", "General Requirements"),
    ("01 General Requirements", "General Requirements"),

    # Existing Conditions
    ("02 Existing Conditions", "Site Work"),

    # Concrete & Structure
    ("03 Concrete", "Concrete & Structure"),
    ("04 Masonry", "Concrete & Structure"),
    ("05 Metals", "Concrete & Structure"),

    # Enclosure
    ("06 Wood, Plastics, and Composites", "Enclosure"),
    ("07 Thermal and Moisture Protection", "Enclosure"),
    ("08 Openings", "Enclosure"),
    ("09 Finishes", "Enclosure"),

    # Specialties & Equipment
    ("10 Specialties", "Specialties & Equipment"),
    ("11 Equipment", "Specialties & Equipment"),
    ("12 Furnishings", "Specialties & Equipment"),
    ("13 Special Construction", "Specialties & Equipment"),
    ("14 Conveying Equipment", "Specialties & Equipment"),

    # Facility Services
    ("21 Fire Suppression", "Facility Services"),
    ("22 Plumbing", "Facility Services"),
    ("23 HVAC", "Facility Services"),
    ("26 Electrical", "Facility Services"),
    ("27 Communications", "Facility Services"),
    ("28 Electronic Safety and Security", "Facility Services"),

    # Site & Infrastructure
    ("31 Earthwork", "Site & Infrastructure"),
    ("32 Exterior Improvements", "Site & Infrastructure"),
    ("33 Utilities", "Site & Infrastructure"),

    # Process Equipment
    ("40 Process Integration", "Process Equipment"),
    ("41 Material Processing and Handling Equipment", "Process Equipment"),
    ("42 Process Heating, Cooling, and Drying Equipment", "Process Equipment"),
    ("43 Process Gas and Liquid Handling, Purification, and Storage Equipment", "Process Equipment"),
    ("44 Pollution Control Equipment", "Process Equipment"),
    ("45 Industry-Specific Manufacturing Equipment", "Process Equipment"),
    ("46 Water and Wastewater Equipment", "Process Equipment"),
    ("48 Electrical Power Generation", "Process Equipment"),
]

# Category labels used by older imports
LEGACY_CATEGORY_MAPPINGS: Dict[str, str] = {
    "05 Metal": "05 Metals",
    "06 Wood & Plastics": "06 Wood, Plastics, and Composites",
    "07 Thermal & Moisture Protection": "07 Thermal and Moisture Protection",
    "12 Furnishing": "12 Furnishings",
    "00 Fees": "00 Procurement and Contracting Requirements",
}

_SECTION_BY_CATEGORY: Dict[str, str] = dict(STANDARD_DIVISIONS)

CSV_HEADER = [
    "MasterFormat Division",
    "Site Built Total",
    "Site Built $/sf",
    "RaaP GC",
    "RaaP Fab",
    "RaaP Total",
    "RaaP $/sf",
    "Savings",
]


def standard_category(category: str) -> str:
    """Map a legacy category label to its standard name."""
    return LEGACY_CATEGORY_MAPPINGS.get(category, category)


def section_for_category(category: str) -> str:
    """Get the comparison-table section for a category ("Other" if unknown)."""
    return _SECTION_BY_CATEGORY.get(standard_category(category), OTHER_SECTION)


def _modular_total(row: CostBreakdown) -> float:
    # Stored total wins so the report reconciles with calculate_cost_totals
    if row.raap_total_cost is not None and str(row.raap_total_cost).strip():
        return parse_money(row.raap_total_cost)
    return parse_money(row.raap_gc_cost) + parse_money(row.raap_fab_cost)


def _make_row(
    label: str,
    site_built: float,
    raap_gc: float,
    raap_fab: float,
    modular_total: float,
    total_sq_ft: int,
) -> BreakdownRow:
    return BreakdownRow(
        label=label,
        site_built=site_built,
        raap_gc=raap_gc,
        raap_fab=raap_fab,
        modular_total=modular_total,
        site_built_per_sf=site_built / total_sq_ft if total_sq_ft > 0 else 0.0,
        modular_per_sf=modular_total / total_sq_ft if total_sq_ft > 0 else 0.0,
        savings=site_built - modular_total,
    )


def _sum_rows(label: str, rows: List[BreakdownRow], total_sq_ft: int) -> BreakdownRow:
    return _make_row(
        label,
        site_built=sum(r.site_built for r in rows),
        raap_gc=sum(r.raap_gc for r in rows),
        raap_fab=sum(r.raap_fab for r in rows),
        modular_total=sum(r.modular_total for r in rows),
        total_sq_ft=total_sq_ft,
    )


def build_breakdown_report(
    project: ProjectLike,
    cost_breakdowns: Optional[Iterable[BreakdownLike]],
) -> BreakdownReport:
    """Group leaf breakdown rows into MasterFormat sections.

    Args:
        project: Project record (model or dict), used for square footage.
        cost_breakdowns: Breakdown rows (models or dicts).

    Returns:
        BreakdownReport with sections sorted by name, rows in input order.
    """
    total_sq_ft = resolve_total_sqft(project)

    grouped: Dict[str, List[BreakdownRow]] = {}
    for breakdown in leaf_breakdowns(cost_breakdowns):
        row = _make_row(
            breakdown.category,
            site_built=parse_money(breakdown.site_built_cost),
            raap_gc=parse_money(breakdown.raap_gc_cost),
            raap_fab=parse_money(breakdown.raap_fab_cost),
            modular_total=_modular_total(breakdown),
            total_sq_ft=total_sq_ft,
        )
        grouped.setdefault(section_for_category(breakdown.category), []).append(row)

    sections = [
        BreakdownSection(
            name=name,
            rows=rows,
            subtotal=_sum_rows(name, rows, total_sq_ft),
        )
        for name, rows in sorted(grouped.items())
    ]

    project_total = _sum_rows(
        PROJECT_TOTAL_LABEL,
        [section.subtotal for section in sections],
        total_sq_ft,
    )

    logger.debug(
        "breakdown_report_built",
        section_count=len(sections),
        row_count=sum(len(s.rows) for s in sections),
        total_sq_ft=total_sq_ft,
    )

    return BreakdownReport(sections=sections, project_total=project_total, total_sq_ft=total_sq_ft)


def _csv_cells(row: BreakdownRow, indent: bool = False) -> List[str]:
    return [
        f"  {row.label}" if indent else row.label,
        format_currency(row.site_built),
        f"${round_half_up(row.site_built_per_sf)}",
        format_currency(row.raap_gc),
        format_currency(row.raap_fab),
        format_currency(row.modular_total),
        f"${round_half_up(row.modular_per_sf)}",
        format_accounting(row.savings),
    ]


def report_to_csv(report: BreakdownReport) -> str:
    """Render a breakdown report as CSV text with every cell quoted."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

    writer.writerow(CSV_HEADER)
    for section in report.sections:
        writer.writerow(_csv_cells(section.subtotal))
        for row in section.rows:
            writer.writerow(_csv_cells(row, indent=True))

    writer.writerow([""] * len(CSV_HEADER))
    writer.writerow(_csv_cells(report.project_total))

    return buffer.getvalue()
