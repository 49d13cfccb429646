"""Boundary Protocols — contract between the intake flow and the record store.

Invariants:
    - Core and services never import a concrete store
    - find_one compares against normalized values (trimmed, email lowercased)
    - create validates the draft before writing and raises SchemaValidationError
      or ConflictError instead of returning partial results

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Protocol
from datetime import date, datetime
from uuid import UUID

from app.core.domain_types import EmployeeField
from app.core.employee_schema import EmployeeDraft


class EmployeeLike(Protocol):
    """Structural contract for a stored employee record."""
    id: UUID
    full_name: str
    email: str
    employee_id: str
    department: str
    position: str
    date_of_joining: date
    registration_date: datetime


class EmployeeRepository(Protocol):
    """Contract for employee persistence, implemented by infrastructure."""
    async def find_one(
        self, field: EmployeeField, value: Any,
    ) -> EmployeeLike | None: ...
    async def create(self, draft: EmployeeDraft) -> EmployeeLike: ...
