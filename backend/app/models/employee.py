"""Employee ORM — persists one registered employee.

Invariants:
    - id is a UUID primary key assigned on creation
    - email and employee_id are each protected by a unique constraint
    - email is stored lowercased and trimmed (normalized before insert)
    - registration_date is set at construction; never updated

Design Decisions:
    - Named unique constraints: insert-time violations map back to the
      offending field by constraint/column name
    - Generic Uuid type: same model works on PostgreSQL and SQLite
    - Unbounded Text columns: no length limit beyond what validation enforces
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Employee(Base):
    """Employee record created by a successful registration."""
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("email", name="uq_employees_email"),
        UniqueConstraint("employee_id", name="uq_employees_employee_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    employee_id: Mapped[str] = mapped_column(Text, nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    position: Mapped[str] = mapped_column(Text, nullable=False)
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)
    registration_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
