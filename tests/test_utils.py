from datetime import datetime
from reminder_app.core.models import Draft, Reminder
from reminder_app.core.utils import format_due, generate_id, matches, next_full_hour


def test_next_full_hour():
    assert next_full_hour(datetime(2024, 3, 14, 9, 30, 12, 5)) == datetime(2024, 3, 14, 10, 0)
    assert next_full_hour(datetime(2024, 12, 31, 23, 0)) == datetime(2025, 1, 1, 0, 0)


def test_format_due():
    assert format_due(datetime(2024, 3, 4, 15, 5)) == "3/4/2024 - 3:05 PM"
    assert format_due(datetime(2024, 11, 20, 9, 0)) == "11/20/2024 - 9:00 AM"


def test_generate_id_unique():
    assert generate_id() != generate_id()


def test_matches_is_case_insensitive():
    reminder = Reminder("id", "Pay Rent", "landlord", datetime(2024, 1, 1), 0)
    assert matches(reminder, "rent")
    assert matches(reminder, "LAND")
    assert matches(reminder, "")
    assert not matches(reminder, "gym")


def test_overdue_only_while_pending(store):
    reminder = store.create(Draft("Late", "", datetime(2024, 1, 1)))
    now = datetime(2024, 1, 2)
    assert reminder.is_overdue(now)
    store.complete(reminder.id)
    assert not reminder.is_overdue(now)
