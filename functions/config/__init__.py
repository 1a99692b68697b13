"""Modular feasibility configuration.

This package contains:
- settings: Environment variables and configuration
- errors: Custom exceptions and error codes
"""

from config.settings import settings
from config.errors import FeasibilityError, ValidationError, WorkflowError

__all__ = [
    "settings",
    "FeasibilityError",
    "ValidationError",
    "WorkflowError",
]
