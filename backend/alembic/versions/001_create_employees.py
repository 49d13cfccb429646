"""Create employees table with unique email and employee_id.

Revision ID: 001_employees
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_employees"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("full_name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("employee_id", sa.Text, nullable=False),
        sa.Column("department", sa.Text, nullable=False),
        sa.Column("position", sa.Text, nullable=False),
        sa.Column("date_of_joining", sa.Date, nullable=False),
        sa.Column(
            "registration_date", sa.DateTime(timezone=True),
            nullable=False, server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("email", name="uq_employees_email"),
        sa.UniqueConstraint("employee_id", name="uq_employees_employee_id"),
    )


def downgrade() -> None:
    op.drop_table("employees")
