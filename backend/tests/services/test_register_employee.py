"""Registration Intake — service-level tests against a real SQLite store.

Tests cover:
    - Successful registration stores normalized fields and server timestamp
    - Missing fields fail before any store access
    - Duplicate email is checked before duplicate employee ID
    - Insert-time unique violations (race past the pre-check) raise ConflictError
    - Schema violations surface as SchemaValidationError with nothing stored
"""

from datetime import datetime, timezone

import pytest

from app.core.domain_types import EmployeeField
from app.core.errors import ConflictError, MissingFieldError, SchemaValidationError
from app.infrastructure.employee_repository import SqlEmployeeRepository
from app.services.register_employee import RegistrationIntake

FIXED_NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


class RecordingRepository:
    """Wraps a repository and records every call."""

    def __init__(self, inner):
        self.inner = inner
        self.calls: list[tuple] = []

    async def find_one(self, field, value):
        self.calls.append(("find_one", field, value))
        return await self.inner.find_one(field, value)

    async def create(self, draft):
        self.calls.append(("create", draft.employee_id))
        return await self.inner.create(draft)


class BlindRepository(SqlEmployeeRepository):
    """Pre-checks never see existing rows, as if a concurrent insert won the race."""

    async def find_one(self, field, value):
        return None


@pytest.fixture
def repository(test_db):
    return SqlEmployeeRepository(test_db)


@pytest.fixture
def intake(repository):
    return RegistrationIntake(repository, clock=lambda: FIXED_NOW)


async def test_register_persists_normalized_record(intake, valid_submission, fetch_employees):
    valid_submission["email"] = "  Jane@X.com "
    employee = await intake.register(valid_submission)

    assert employee.id is not None
    assert employee.email == "jane@x.com"
    assert employee.registration_date == FIXED_NOW

    stored = await fetch_employees()
    assert [e.employee_id for e in stored] == ["E1"]
    assert stored[0].department == "Eng"


async def test_client_registration_date_ignored(intake, valid_submission):
    valid_submission["registrationDate"] = "2001-01-01T00:00:00Z"
    employee = await intake.register(valid_submission)
    assert employee.registration_date == FIXED_NOW


async def test_missing_field_makes_no_store_calls(repository, valid_submission):
    recorder = RecordingRepository(repository)
    del valid_submission["employeeId"]

    with pytest.raises(MissingFieldError):
        await RegistrationIntake(recorder).register(valid_submission)
    assert recorder.calls == []


async def test_checks_email_then_employee_id_then_creates(repository, valid_submission):
    recorder = RecordingRepository(repository)
    await RegistrationIntake(recorder).register(valid_submission)

    assert recorder.calls == [
        ("find_one", EmployeeField.EMAIL, "jane@x.com"),
        ("find_one", EmployeeField.EMPLOYEE_ID, "E1"),
        ("create", "E1"),
    ]


async def test_duplicate_email_rejected(intake, valid_submission, count_employees):
    await intake.register(valid_submission)
    with pytest.raises(ConflictError) as exc_info:
        await intake.register({**valid_submission, "employeeId": "E2"})
    assert exc_info.value.field is EmployeeField.EMAIL
    assert await count_employees() == 1


async def test_duplicate_email_is_case_insensitive(intake, valid_submission):
    await intake.register(valid_submission)
    with pytest.raises(ConflictError) as exc_info:
        await intake.register(
            {**valid_submission, "email": " JANE@X.COM", "employeeId": "E2"},
        )
    assert exc_info.value.field is EmployeeField.EMAIL


async def test_duplicate_employee_id_rejected(intake, valid_submission, count_employees):
    await intake.register(valid_submission)
    with pytest.raises(ConflictError) as exc_info:
        await intake.register({**valid_submission, "email": "john@x.com"})
    assert exc_info.value.field is EmployeeField.EMPLOYEE_ID
    assert await count_employees() == 1


async def test_email_conflict_reported_before_id_conflict(intake, valid_submission):
    await intake.register(valid_submission)
    with pytest.raises(ConflictError) as exc_info:
        await intake.register(valid_submission)
    assert exc_info.value.field is EmployeeField.EMAIL


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"employeeId": "E2"}, EmployeeField.EMAIL),
        ({"email": "other@x.com"}, EmployeeField.EMPLOYEE_ID),
    ],
)
async def test_insert_time_violation_raises_conflict(
    test_db, valid_submission, count_employees, overrides, field,
):
    intake = RegistrationIntake(BlindRepository(test_db))
    await intake.register(valid_submission)

    with pytest.raises(ConflictError) as exc_info:
        await intake.register({**valid_submission, **overrides})
    assert exc_info.value.field is field
    assert await count_employees() == 1


async def test_store_rejects_invalid_email(intake, valid_submission, count_employees):
    with pytest.raises(SchemaValidationError) as exc_info:
        await intake.register({**valid_submission, "email": "not-an-email"})
    assert exc_info.value.field_errors == {
        "email": "Please enter a valid email address.",
    }
    assert await count_employees() == 0


async def test_repository_usable_after_rejected_insert(test_db, valid_submission, count_employees):
    intake = RegistrationIntake(BlindRepository(test_db))
    await intake.register(valid_submission)
    with pytest.raises(ConflictError):
        await intake.register(valid_submission)

    await intake.register(
        {**valid_submission, "email": "sam@x.com", "employeeId": "E9"},
    )
    assert await count_employees() == 2
