"""Error types, violation records and error-response formatting."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


# --- Violation records (one per defect found) ---
class MissingField(BaseModel):
    kind: Literal["missing_field"] = "missing_field"
    field: str


class InvalidType(BaseModel):
    kind: Literal["invalid_type"] = "invalid_type"
    field: str
    expected: str
    received: str


class CoercionFailure(BaseModel):
    kind: Literal["coercion_failure"] = "coercion_failure"
    field: str
    reason: str


class IndexedElementError(BaseModel):
    """Failure of one element of a list; ``field`` is None for a top-level collection."""

    kind: Literal["indexed_element"] = "indexed_element"
    index: int
    field: str | None = None
    message: str
    violations: list[Violation] = Field(default_factory=list)


class NestedEntityError(BaseModel):
    """Failure of an embedded object, e.g. a comment's profile."""

    kind: Literal["nested_entity"] = "nested_entity"
    field: str
    message: str
    violations: list[Violation] = Field(default_factory=list)


class ParameterViolation(BaseModel):
    kind: Literal["parameter"] = "parameter"
    param: str
    reason: str


Violation = Annotated[
    Union[
        MissingField,
        InvalidType,
        CoercionFailure,
        IndexedElementError,
        NestedEntityError,
        ParameterViolation,
    ],
    Field(discriminator="kind"),
]

IndexedElementError.model_rebuild()
NestedEntityError.model_rebuild()


# --- Exceptions ---
class ApiError(Exception):
    """Base class for errors that carry an HTTP status and a machine-readable type."""

    status_code = 500
    error_type = "API_ERROR"

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.timestamp = datetime.now(timezone.utc)


class ValidationError(ApiError):
    """Raised by every entity, collection and parameter validator.

    ``details`` keeps the open wire shape (``missingFields``/``invalidTypes``,
    ``index``/``originalError`` or parameter keys); ``violations`` holds the same
    defects as typed records for programmatic handling.
    """

    status_code = 400
    error_type = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        details: Any = None,
        violations: list[Violation] | None = None,
    ):
        super().__init__(message, details)
        self.violations = list(violations or [])

    @property
    def missing_fields(self) -> list[str]:
        return [v.field for v in self.violations if isinstance(v, MissingField)]

    @property
    def invalid_fields(self) -> list[str]:
        return [
            v.field
            for v in self.violations
            if isinstance(v, (InvalidType, CoercionFailure))
            or (isinstance(v, (IndexedElementError, NestedEntityError)) and v.field is not None)
        ]


# --- Wire payload (consistent shape for 4xx/5xx) ---
class ErrorResponse(BaseModel):
    error: str = Field(..., description="Machine-readable error type, e.g. VALIDATION_ERROR")
    message: str = Field(..., description="Human-readable message, safe to display")
    statusCode: int
    details: Any = None
    violations: list[Violation] = Field(default_factory=list)
    timestamp: str


def format_error_response(error: BaseException) -> ErrorResponse:
    """Convert any exception into the standard error payload."""
    if isinstance(error, ApiError):
        return ErrorResponse(
            error=error.error_type,
            message=error.message,
            statusCode=error.status_code,
            details=error.details,
            violations=getattr(error, "violations", []),
            timestamp=error.timestamp.isoformat(),
        )
    return ErrorResponse(
        error="INTERNAL_ERROR",
        message=str(error) or "An unexpected error occurred",
        statusCode=500,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
