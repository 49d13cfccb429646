"""Registration Intake — validates a submission and persists a new employee.

Invariants:
    - Presence check runs first; a missing field means zero store calls
    - Duplicate email is checked before duplicate employee ID (one-shot, no retries)
    - registration_date is taken from the server clock at construction
    - The store's unique index is the authority: pre-checks only produce the
      friendlier error early, an insert-time rejection yields the same ConflictError

Design Decisions:
    - Pre-checks and insert are NOT one transaction; concurrent duplicates are
      resolved by the unique constraint
    - Clock injected as a callable so tests can pin registration time
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from app.core.domain_types import EmployeeField, UNIQUE_FIELDS
from app.core.employee_schema import build_draft, find_missing_fields
from app.core.errors import ConflictError, ErrorContext, MissingFieldError
from app.core.repository_protocols import EmployeeLike, EmployeeRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegistrationIntake:
    """Runs one registration submission against an EmployeeRepository."""

    def __init__(
        self,
        repository: EmployeeRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        self.clock = clock

    async def register(self, submission: Mapping[str, Any]) -> EmployeeLike:
        """Validate, check uniqueness, and create. Raises IntakeError subclasses."""
        missing = find_missing_fields(submission)
        if missing:
            raise MissingFieldError(missing)

        for field in UNIQUE_FIELDS:
            await self._reject_duplicate(field, submission[field.value])

        draft = build_draft(submission, registered_at=self.clock())
        employee = await self.repository.create(draft)
        logger.info(
            "Employee registered",
            extra={"employee_id": employee.employee_id, "record_id": str(employee.id)},
        )
        return employee

    async def _reject_duplicate(self, field: EmployeeField, value: Any) -> None:
        existing = await self.repository.find_one(field, value)
        if existing is not None:
            raise ConflictError(
                field, ErrorContext(employee_id=existing.employee_id),
            )
