"""Modular feasibility error handling.

Cost aggregation itself never raises: malformed monetary input degrades to
zero. The errors here cover project payload validation, workflow stage
gating and unreadable report input.
"""

from typing import Any, Dict, Optional


class ErrorCode:
    """Error code constants."""

    # Payload validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FIELD = "INVALID_FIELD"

    # Workflow gating
    STAGE_LOCKED = "STAGE_LOCKED"
    UNKNOWN_STAGE = "UNKNOWN_STAGE"

    # Cost report input
    INVALID_INPUT_FILE = "INVALID_INPUT_FILE"


class FeasibilityError(Exception):
    """Base exception for modular feasibility errors.

    Attributes:
        code: One of the ErrorCode constants
        message: Message shown to the caller
        details: Structured context (field, stage, path, ...)
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize as {code, message, details} for JSON output."""
        return {"code": self.code, "message": self.message, "details": self.details}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(FeasibilityError):
    """A project payload failed validation."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict] = None,
        code: str = ErrorCode.VALIDATION_ERROR
    ):
        if field:
            details = {**(details or {}), "field": field}
        super().__init__(code, message, details)


class WorkflowError(FeasibilityError):
    """A workflow stage could not be resolved or is not yet available."""

    def __init__(
        self,
        code: str,
        message: str,
        stage: str,
        project_id: Optional[str] = None,
        details: Optional[Dict] = None
    ):
        super().__init__(code, message, {**(details or {}), "stage": stage, "project_id": project_id})
        self.stage = stage
        self.project_id = project_id
