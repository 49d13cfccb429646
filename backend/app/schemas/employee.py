"""Employee Schemas — response contract for a successful registration.

Invariants:
    - EmployeeSummary exposes only id, fullName, email, employeeId
    - Department, position and dates never leave the service

Design Decisions:
    - snake_case attributes with camelCase aliases: the wire format matches the
      submitted field names
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.repository_protocols import EmployeeLike


REGISTERED_MESSAGE = "Employee registered successfully!"


class EmployeeSummary(BaseModel):
    """Minimal projection of a created employee."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    full_name: str = Field(alias="fullName")
    email: str
    employee_id: str = Field(alias="employeeId")

    @classmethod
    def from_record(cls, employee: EmployeeLike) -> "EmployeeSummary":
        return cls(
            id=employee.id,
            full_name=employee.full_name,
            email=employee.email,
            employee_id=employee.employee_id,
        )


class RegistrationResponse(BaseModel):
    """Body of a 201 response to POST /register."""
    message: str = REGISTERED_MESSAGE
    employee: EmployeeSummary
