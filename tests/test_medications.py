"""Tests for medication reminders."""

from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from health_tracker.domain.medications import MedicationDraft
from health_tracker.services.medications import (
    MedicationService,
    ReminderNotFoundError,
    is_active,
    split_active,
)
from tests.conftest import InMemoryMedicationRepository


def _service() -> MedicationService:
    return MedicationService(InMemoryMedicationRepository())


def test_create_reminder_defaults(user_id) -> None:
    service = _service()

    reminder = service.create_reminder(
        user_id,
        MedicationDraft(
            medication_name="Vitamin D", dosage="1000 IU", start_date=date(2024, 1, 1)
        ),
    )

    assert reminder.frequency == "daily"
    assert reminder.time_of_day == ["08:00"]
    assert service.list_reminders(user_id) == [reminder]


def test_update_reminder_refreshes_updated_at(user_id) -> None:
    service = _service()
    reminder = service.create_reminder(
        user_id,
        MedicationDraft(medication_name="Iron", dosage="65mg", start_date=date(2024, 1, 1)),
    )

    updated = service.update_reminder(user_id, reminder.id, {"dosage": "130mg"})

    assert updated.dosage == "130mg"
    assert updated.updated_at >= reminder.updated_at


def test_update_rejects_unknown_fields_and_missing_reminders(user_id) -> None:
    service = _service()

    with pytest.raises(ValueError, match="user_id"):
        service.update_reminder(user_id, uuid4(), {"user_id": uuid4()})
    with pytest.raises(ReminderNotFoundError):
        service.update_reminder(user_id, uuid4(), {"dosage": "1"})
    with pytest.raises(ReminderNotFoundError):
        service.delete_reminder(user_id, uuid4())


def test_reminders_are_private_to_their_owner(user_id) -> None:
    service = _service()
    reminder = service.create_reminder(
        user_id,
        MedicationDraft(medication_name="Iron", dosage="65mg", start_date=date(2024, 1, 1)),
    )

    with pytest.raises(ReminderNotFoundError):
        service.delete_reminder(uuid4(), reminder.id)
    assert service.list_reminders(uuid4()) == []


def test_end_date_is_inclusive(user_id) -> None:
    service = _service()
    reminder = service.create_reminder(
        user_id,
        MedicationDraft(
            medication_name="Antibiotic",
            dosage="500mg",
            start_date=date(2024, 3, 1),
            end_date=date(2024, 3, 7),
        ),
    )

    assert is_active(reminder, datetime(2024, 3, 7, 23, 59, tzinfo=UTC))
    assert not is_active(reminder, datetime(2024, 3, 8, 0, 1, tzinfo=UTC))
    assert not is_active(reminder, datetime(2024, 2, 29, 12, tzinfo=UTC))

    active, inactive = split_active([reminder], date(2024, 3, 8))
    assert active == []
    assert inactive == [reminder]


def test_update_validates_merged_date_range(user_id) -> None:
    service = _service()
    reminder = service.create_reminder(
        user_id,
        MedicationDraft(medication_name="Iron", dosage="65mg", start_date=date(2024, 3, 10)),
    )

    with pytest.raises(ValueError, match="end_date"):
        service.update_reminder(user_id, reminder.id, {"end_date": date(2024, 3, 1)})
    with pytest.raises(ValueError, match="cleared"):
        service.update_reminder(user_id, reminder.id, {"medication_name": None})
    with pytest.raises(ReminderNotFoundError):
        service.update_reminder(user_id, uuid4(), {"end_date": date(2024, 3, 20)})

    updated = service.update_reminder(
        user_id,
        reminder.id,
        {"start_date": date(2024, 2, 1), "end_date": date(2024, 3, 1)},
    )
    assert updated.end_date == date(2024, 3, 1)


def test_create_rejects_backwards_range(user_id) -> None:
    with pytest.raises(ValueError, match="end_date"):
        _service().create_reminder(
            user_id,
            MedicationDraft(
                medication_name="Iron",
                dosage="65mg",
                start_date=date(2024, 3, 10),
                end_date=date(2024, 3, 1),
            ),
        )
