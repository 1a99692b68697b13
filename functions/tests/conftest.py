"""Pytest configuration and shared fixtures for modular feasibility tests."""

import os
import sys
import pytest
from typing import Dict, Any, List


# ============================================================================
# Ensure local imports work (config/, models/, services/, utils/)
# ============================================================================
#
# The codebase uses absolute imports like `from models...` / `from services...`,
# so `functions/` must be importable as the top-level module root.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


# ============================================================================
# Project Fixtures
# ============================================================================

@pytest.fixture
def sample_project() -> Dict[str, Any]:
    """24-unit multifamily project with a known footprint (146' x 66' = 9636 sf)."""
    return {
        "id": "proj-test-001",
        "name": "Test Village",
        "address": "123 Main St, Vallejo, CA",
        "projectType": "affordable",
        "targetFloors": 3,
        "studioUnits": 0,
        "oneBedUnits": 6,
        "twoBedUnits": 12,
        "threeBedUnits": 6,
        "buildingDimensions": "146' X 66'",
        "isSample": False,
        "modularFeasibilityComplete": False,
        "smartStartComplete": False,
        "fabAssureComplete": False,
        "easyDesignComplete": False,
    }


@pytest.fixture
def hotel_project() -> Dict[str, Any]:
    """Hotel project without a unit mix or footprint."""
    return {
        "id": 42,
        "name": "Harbor Hotel",
        "projectType": "hotel",
        "targetFloors": 4,
    }


@pytest.fixture
def sample_cost_breakdowns() -> List[Dict[str, Any]]:
    """Two leaf MasterFormat rows as imported from a spreadsheet."""
    return [
        {
            "category": "03 Concrete",
            "siteBuiltCost": "2,533,115",
            "raapTotalCost": "1,998,927",
        },
        {
            "category": "04 Masonry",
            "siteBuiltCost": "916,443",
            "raapTotalCost": "845,392",
        },
    ]


@pytest.fixture
def detailed_cost_breakdowns() -> List[Dict[str, Any]]:
    """Leaf rows with GC/Fab splits, a legacy label, an unknown division and a rollup row."""
    return [
        {
            "category": "03 Concrete",
            "siteBuiltCost": "$1,000",
            "raapGcCost": "$600",
            "raapFabCost": "$200",
            "raapTotalCost": "$800",
        },
        {
            "category": "05 Metal",
            "siteBuiltCost": "500",
            "raapGcCost": "100",
            "raapFabCost": "300",
            "raapTotalCost": "400",
        },
        {
            "category": "09 Finishes",
            "siteBuiltCost": "2,000",
            "raapGcCost": "500",
            "raapFabCost": "1,000",
            "raapTotalCost": "1,500",
        },
        {
            "category": "22 Plumbing",
            "siteBuiltCost": "750",
            "raapGcCost": "250",
            "raapFabCost": "300",
            "raapTotalCost": "550",
        },
        {
            "category": "99 Owner Allowances",
            "siteBuiltCost": "100",
            "raapGcCost": "100",
            "raapFabCost": "0",
            "raapTotalCost": "100",
        },
        {
            "category": "Concrete & Structure Subtotal",
            "siteBuiltCost": "1,500",
            "raapGcCost": "700",
            "raapFabCost": "500",
            "raapTotalCost": "1,200",
        },
    ]
