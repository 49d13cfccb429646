"""Employee Repository — SQLAlchemy implementation of the EmployeeRepository protocol.

Invariants:
    - find_one normalizes the lookup value exactly as records are normalized on insert
    - create validates the draft first; nothing is written when validation fails
    - A unique-constraint rejection at commit becomes ConflictError for that field
    - Any other integrity failure becomes DatabaseError (never leaks driver text)
"""

import logging
from datetime import date
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EmployeeField, UNIQUE_FIELDS
from app.core.employee_schema import (
    EmployeeDraft, normalize_lookup, validate_employee,
)
from app.core.errors import ConflictError, DatabaseError, SchemaValidationError
from app.models.employee import Employee

logger = logging.getLogger(__name__)


def conflicting_field(error_text: str) -> EmployeeField | None:
    """Map a driver's unique-violation message to the field it concerns.

    PostgreSQL names the constraint (uq_employees_email), SQLite names the
    column (employees.email).
    """
    for field in UNIQUE_FIELDS:
        if (
            f"uq_employees_{field.column}" in error_text
            or f"employees.{field.column}" in error_text
        ):
            return field
    return None


class SqlEmployeeRepository:
    """Employee persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one(self, field: EmployeeField, value: Any) -> Employee | None:
        lookup = normalize_lookup(field, value)
        if not isinstance(lookup, (str, date)):
            # nothing stored can equal a value validation will reject
            return None
        column = getattr(Employee, field.column)
        result = await self.db.execute(
            select(Employee).where(column == lookup).limit(1),
        )
        return result.scalar_one_or_none()

    async def create(self, draft: EmployeeDraft) -> Employee:
        violations = validate_employee(draft)
        if violations:
            raise SchemaValidationError(violations)

        employee = Employee(
            full_name=draft.full_name,
            email=draft.email,
            employee_id=draft.employee_id,
            department=draft.department,
            position=draft.position,
            date_of_joining=draft.date_of_joining,
            registration_date=draft.registration_date,
        )
        self.db.add(employee)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            field = conflicting_field(str(e.orig))
            if field is None:
                logger.error(f"Unexpected integrity error on insert: {e}")
                raise DatabaseError(str(e.orig), "insert") from e
            logger.warning(
                "Unique constraint rejected insert",
                extra={"field": field.value},
            )
            raise ConflictError(field) from e
        return employee
