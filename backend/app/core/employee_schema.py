"""Employee Schema — presence check, normalization and field validation (pure).

Invariants:
    - find_missing_fields never touches the store (runs before any lookup)
    - build_draft trims every text field and lowercases email; registration_date
      always comes from the caller, never from the submission
    - validate_employee is PURE: returns every violation, raises nothing
    - Values that cannot be cast (non-text, unparseable dates) stay raw in the
      draft so validation can report them

Design Decisions:
    - Explicit validation function instead of ORM-level validators: the rules
      are readable in one place and testable without a database
    - Presence check follows form semantics: only absent/null/false/"" count as
      missing; whitespace-only values pass it and are rejected by validation
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from app.core.domain_types import EmployeeField, FieldViolation, REQUIRED_FIELDS


EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
INVALID_EMAIL_MESSAGE = "Please enter a valid email address."


@dataclass
class EmployeeDraft:
    """A record about to be created: normalized, not yet validated."""
    full_name: Any
    email: Any
    employee_id: Any
    department: Any
    position: Any
    date_of_joining: Any
    registration_date: datetime

    def value_of(self, field: EmployeeField) -> Any:
        return getattr(self, field.column)


# ─── Presence ────────────────────────────────────────────────────

def _is_blank(value: Any) -> bool:
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and not value


def find_missing_fields(submission: Mapping[str, Any]) -> list[EmployeeField]:
    """Return required fields that are absent or empty, in declaration order."""
    return [
        field for field in REQUIRED_FIELDS
        if _is_blank(submission.get(field.value))
    ]


# ─── Normalization ───────────────────────────────────────────────

def normalize_text(value: Any) -> Any:
    """Trim strings, stringify numbers, leave anything else untouched."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def normalize_email(value: Any) -> Any:
    value = normalize_text(value)
    return value.lower() if isinstance(value, str) else value


def parse_date(value: Any) -> Any:
    """Parse YYYY-MM-DD or an ISO-8601 datetime (offsets resolved to the UTC date).

    Unparseable input is returned as-is.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return value
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def normalize_lookup(field: EmployeeField, value: Any) -> Any:
    """Apply the same normalization the store applies before comparing."""
    if field is EmployeeField.EMAIL:
        return normalize_email(value)
    if field is EmployeeField.DATE_OF_JOINING:
        return parse_date(value)
    return normalize_text(value)


def build_draft(submission: Mapping[str, Any], registered_at: datetime) -> EmployeeDraft:
    """Build a draft from the six client fields. Unknown keys are ignored."""
    return EmployeeDraft(
        full_name=normalize_text(submission.get(EmployeeField.FULL_NAME.value)),
        email=normalize_email(submission.get(EmployeeField.EMAIL.value)),
        employee_id=normalize_text(submission.get(EmployeeField.EMPLOYEE_ID.value)),
        department=normalize_text(submission.get(EmployeeField.DEPARTMENT.value)),
        position=normalize_text(submission.get(EmployeeField.POSITION.value)),
        date_of_joining=parse_date(submission.get(EmployeeField.DATE_OF_JOINING.value)),
        registration_date=registered_at,
    )


# ─── Validation ──────────────────────────────────────────────────

def _check_text(field: EmployeeField, value: Any) -> str | None:
    if value is None or value == "":
        return f"{field.label} is required."
    if not isinstance(value, str):
        return f"{field.label} must be text."
    return None


def _check_date(field: EmployeeField, value: Any) -> str | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return f"{field.label} is required."
    if not isinstance(value, date):
        return f"{field.label} must be a valid date."
    return None


def validate_employee(draft: EmployeeDraft) -> list[FieldViolation]:
    """Check every field of the draft. Empty list means the draft is storable."""
    violations: list[FieldViolation] = []
    for field in REQUIRED_FIELDS:
        value = draft.value_of(field)
        if field is EmployeeField.DATE_OF_JOINING:
            message = _check_date(field, value)
        else:
            message = _check_text(field, value)
        if message is None and field is EmployeeField.EMAIL:
            if not EMAIL_PATTERN.search(value):
                message = INVALID_EMAIL_MESSAGE
        if message is not None:
            violations.append(FieldViolation(field, message))
    return violations
