"""Domain Types — field names and value types shared across the intake flow.

Invariants:
    - EmployeeField values are the wire names clients submit (camelCase)
    - REQUIRED_FIELDS lists exactly the six client-supplied fields
    - UNIQUE_FIELDS are the fields backed by a unique index in the store

Design Decisions:
    - str Enum: members serialize to JSON and compare equal to their wire name
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class EmployeeField(str, Enum):
    """Client-facing field names of an employee registration."""
    FULL_NAME = "fullName"
    EMAIL = "email"
    EMPLOYEE_ID = "employeeId"
    DEPARTMENT = "department"
    POSITION = "position"
    DATE_OF_JOINING = "dateOfJoining"

    @property
    def label(self) -> str:
        return FIELD_LABELS[self]

    @property
    def column(self) -> str:
        return FIELD_COLUMNS[self]


FIELD_LABELS: dict[EmployeeField, str] = {
    EmployeeField.FULL_NAME: "Full name",
    EmployeeField.EMAIL: "Email",
    EmployeeField.EMPLOYEE_ID: "Employee ID",
    EmployeeField.DEPARTMENT: "Department",
    EmployeeField.POSITION: "Position",
    EmployeeField.DATE_OF_JOINING: "Date of joining",
}

FIELD_COLUMNS: dict[EmployeeField, str] = {
    EmployeeField.FULL_NAME: "full_name",
    EmployeeField.EMAIL: "email",
    EmployeeField.EMPLOYEE_ID: "employee_id",
    EmployeeField.DEPARTMENT: "department",
    EmployeeField.POSITION: "position",
    EmployeeField.DATE_OF_JOINING: "date_of_joining",
}

REQUIRED_FIELDS: tuple[EmployeeField, ...] = tuple(EmployeeField)

UNIQUE_FIELDS: tuple[EmployeeField, ...] = (
    EmployeeField.EMAIL, EmployeeField.EMPLOYEE_ID,
)


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldViolation:
    """One field-level rejection produced by schema validation."""
    field: EmployeeField
    message: str
