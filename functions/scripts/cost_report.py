"""
Print the site-built vs. modular cost comparison for a project export.

The input is a JSON file holding a project record and its MasterFormat cost
breakdown rows, as exported from the projects database:

  {"project": {...}, "costBreakdowns": [{"category": "03 Concrete", ...}, ...]}

Usage:
  python scripts/cost_report.py project-export.json
  python scripts/cost_report.py project-export.json --csv breakdown.csv
  python scripts/cost_report.py project-export.json --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

# Allow running as a plain script from the functions/ directory
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog

from config.errors import ErrorCode, FeasibilityError
from config.settings import settings
from services.cost_totals import calculate_cost_totals
from services.feasibility_scoring import assess_feasibility
from services.masterformat import build_breakdown_report, report_to_csv
from utils.report_logger import log_breakdown_report, log_cost_totals, log_feasibility_scores
from validators.project_validator import parse_cost_breakdowns, require_valid_project

logger = structlog.get_logger()


def _load_export(path: str) -> Dict[str, Any]:
    """Read and sanity-check the export file.

    Raises:
        FeasibilityError: If the file is unreadable or malformed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FeasibilityError(
            code=ErrorCode.INVALID_INPUT_FILE,
            message=f"Could not read {path}: {e}",
            details={"path": path},
        )

    if not isinstance(data, dict) or not isinstance(data.get("project"), dict):
        raise FeasibilityError(
            code=ErrorCode.INVALID_INPUT_FILE,
            message=f"{path} must contain a 'project' object",
            details={"path": path},
        )

    rows = data.get("costBreakdowns", data.get("cost_breakdowns")) or []
    if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
        raise FeasibilityError(
            code=ErrorCode.INVALID_INPUT_FILE,
            message=f"{path}: 'costBreakdowns' must be a list of objects",
            details={"path": path},
        )

    return {"project": data["project"], "costBreakdowns": rows}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Site-built vs. modular cost comparison for a project export")
    parser.add_argument("input", help="Project export JSON file")
    parser.add_argument("--csv", required=False, help="Write the MasterFormat breakdown CSV to this path")
    parser.add_argument("--json", action="store_true", help="Print totals as JSON instead of the banner")
    args = parser.parse_args(argv)

    settings.validate()

    # Logs go to stderr so --json output stays parseable
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    try:
        export = _load_export(args.input)
        project = require_valid_project(export["project"])
    except FeasibilityError as e:
        logger.error("cost_report_input_rejected", code=e.code, path=args.input)
        print(e.message)
        return 2

    breakdowns = parse_cost_breakdowns(export["costBreakdowns"])

    totals = calculate_cost_totals(project, breakdowns)
    report = build_breakdown_report(project, breakdowns)

    if args.json:
        print(json.dumps(totals.to_dict(), indent=2, sort_keys=True))
    else:
        log_cost_totals(project.name, totals)
        log_breakdown_report(report)
        log_feasibility_scores(project.name, assess_feasibility(project))

    if args.csv:
        with open(args.csv, "w", encoding="utf-8", newline="") as f:
            f.write(report_to_csv(report))
        print(f"Wrote {args.csv}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
