"""Error Hierarchy — typed, categorized exceptions for all intake failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are reported to the client; infrastructure errors
      (500-level) carry only a generic message, detail stays in the logs
    - to_response() produces the {message, errors?} envelope

Design Decisions:
    - Single hierarchy with IntakeError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from app.core.domain_types import EmployeeField, FieldViolation


GENERIC_SERVER_MESSAGE = "Server error during registration. Please try again later."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: str | None = None
    debug_info: dict[str, Any] | None = None


class IntakeError(Exception):
    """Base exception for all employee intake errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def field_errors(self) -> dict[str, str]:
        """Per-field messages exposed to the client (empty by default)."""
        return {}

    def to_response(self) -> dict:
        """Convert to the client-facing error body."""
        body: dict[str, Any] = {"message": self.message}
        if self.field_errors:
            body["errors"] = {
                name: {"msg": msg} for name, msg in self.field_errors.items()
            }
        return body


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldError(IntakeError):
    """One or more required fields absent or empty."""
    def __init__(self, missing: list[EmployeeField], context: ErrorContext | None = None):
        super().__init__(
            "All fields are required.",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.missing = missing


class ConflictError(IntakeError):
    """A record with the same unique field value already exists."""

    _MESSAGES = {
        EmployeeField.EMAIL: (
            "An employee with this email already exists.",
            "Email already in use.",
        ),
        EmployeeField.EMPLOYEE_ID: (
            "An employee with this Employee ID already exists.",
            "Employee ID already in use.",
        ),
    }

    def __init__(self, field: EmployeeField, context: ErrorContext | None = None):
        message, self.field_message = self._MESSAGES[field]
        super().__init__(
            message, "DUPLICATE_FIELD", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    @property
    def field_errors(self) -> dict[str, str]:
        return {self.field.value: self.field_message}


class SchemaValidationError(IntakeError):
    """The store rejected the record for one or more field-level reasons."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Validation failed. Please check your input.",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = violations

    @property
    def field_errors(self) -> dict[str, str]:
        # first violation per field wins
        errors: dict[str, str] = {}
        for violation in self.violations:
            errors.setdefault(violation.field.value, violation.message)
        return errors


class MalformedBodyError(IntakeError):
    """Request body could not be decoded into a submission."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Malformed request body.",
            "MALFORMED_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(IntakeError):
    """Store operation failed. The client only sees the generic message."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            GENERIC_SERVER_MESSAGE,
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = f"Database {operation} failed: {detail}"
        self.operation = operation


class StartupConnectionError(IntakeError):
    """Store unreachable while the application starts."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            GENERIC_SERVER_MESSAGE,
            "STORE_UNREACHABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail

    def __str__(self) -> str:
        return f"Could not connect to the employee store: {self.detail}"
