"""Registration Routes — serves the form and accepts registrations.

Invariants:
    - GET / returns the bundled HTML form
    - POST /register answers 201 with the minimal employee projection
    - Every failure is raised as an IntakeError and shaped by error_handlers

Design Decisions:
    - RegistrationIntake built per request from the request's DB session
"""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.request_body import read_submission
from app.infrastructure.database import get_db
from app.infrastructure.employee_repository import SqlEmployeeRepository
from app.schemas.employee import EmployeeSummary, RegistrationResponse
from app.services.register_employee import RegistrationIntake

logger = logging.getLogger(__name__)
router = APIRouter(tags=["registration"])

FORM_PATH = Path(__file__).resolve().parents[2] / "static" / "index.html"


def get_registration_intake(
    db: AsyncSession = Depends(get_db),
) -> RegistrationIntake:
    return RegistrationIntake(SqlEmployeeRepository(db))


@router.get("/", include_in_schema=False)
async def registration_form():
    """Serve the registration form document."""
    return FileResponse(FORM_PATH, media_type="text/html")


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_employee(
    request: Request,
    intake: RegistrationIntake = Depends(get_registration_intake),
):
    """Register a new employee from a JSON or form-encoded body."""
    submission = await read_submission(request)
    employee = await intake.register(submission)
    return RegistrationResponse(employee=EmployeeSummary.from_record(employee))
