"""Modular Feasibility - cost comparison core.

This package contains the Python calculation core behind the modular
feasibility workflow: site-built vs. modular cost totals, the MasterFormat
breakdown report, feasibility scoring and workflow stage gating.

Layout:
- config: Settings and structured errors
- models: Pydantic records (projects, breakdowns, totals, scores, stages)
- services: Cost aggregation, square-footage resolution, scoring, workflow
- validators: Project payload parsing
- scripts: Command-line cost report
"""

__version__ = "1.0.0"
