"""Project payload parsing and validation.

Deserializes raw project and cost-breakdown records into typed Pydantic
models. Validation is lenient: unit counts and flags are coerced rather
than rejected, and only a name and project type are required.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError as PydanticValidationError
import structlog

from config.errors import ErrorCode, ValidationError
from models.project import CostBreakdown, Project

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("name", "projectType")


@dataclass
class ValidationResult:
    """Result of project payload validation."""
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    parsed: Optional[Project] = None
    raw_data: Optional[Dict[str, Any]] = None
    error_code: Optional[str] = None


def parse_project(data: Dict[str, Any]) -> Project:
    """Parse a raw project record into a typed Project.

    Args:
        data: Raw dictionary (camelCase or snake_case keys)

    Returns:
        Typed Project object
    """
    return Project.model_validate(data)


def parse_cost_breakdowns(rows: Optional[Iterable[Dict[str, Any]]]) -> List[CostBreakdown]:
    """Parse raw cost-breakdown records into typed CostBreakdown objects."""
    return [CostBreakdown.model_validate(row) for row in rows or []]


def validate_project_payload(data: Any) -> ValidationResult:
    """Validate a project payload and return the result.

    Args:
        data: Raw dictionary from the caller

    Returns:
        ValidationResult with is_valid, errors, and parsed object
    """
    if not isinstance(data, dict):
        return ValidationResult(
            is_valid=False,
            errors=["project payload must be a dictionary"],
            parsed=None,
            raw_data=None,
            error_code=ErrorCode.VALIDATION_ERROR
        )

    errors = []
    for name in REQUIRED_FIELDS:
        snake_name = "project_type" if name == "projectType" else name
        value = data.get(name, data.get(snake_name))
        if value is None or not str(value).strip():
            errors.append(f"{name}: field required")

    if errors:
        logger.warning("project_validation_failed", errors=errors, keys=list(data.keys()))
        return ValidationResult(
            is_valid=False, errors=errors, raw_data=data, error_code=ErrorCode.MISSING_FIELD
        )

    try:
        parsed = parse_project(data)
    except PydanticValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        logger.warning("project_validation_failed", errors=errors)
        return ValidationResult(
            is_valid=False, errors=errors, raw_data=data, error_code=ErrorCode.INVALID_FIELD
        )

    return ValidationResult(is_valid=True, errors=[], parsed=parsed, raw_data=data)


def require_valid_project(data: Any) -> Project:
    """Validate a project payload, raising on failure.

    Raises:
        ValidationError: If the payload is invalid; details carry every error.
    """
    result = validate_project_payload(data)
    if not result.is_valid:
        first_field = result.errors[0].split(":", 1)[0]
        raise ValidationError(
            f"Invalid project: {'; '.join(result.errors)}",
            field=first_field,
            details={"errors": result.errors},
            code=result.error_code,
        )
    return result.parsed
