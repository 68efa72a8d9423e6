from datetime import datetime, timedelta
import pytest
from reminder_app.core.creation_flow import CreationFlow
from reminder_app.core.models import Draft, TieBreak
from reminder_app.core.store import ReminderStore

NOW = datetime(2024, 3, 14, 9, 30)


@pytest.fixture
def store():
    return ReminderStore()


@pytest.fixture
def completion_store():
    return ReminderStore(tie_break=TieBreak.COMPLETION)


@pytest.fixture
def flow(store):
    return CreationFlow(store.create, clock=lambda: NOW)


@pytest.fixture
def make_draft():
    """Build a draft due `hours` after the fixed test clock."""
    def _make(title, hours=0, description=""):
        return Draft(title, description, NOW + timedelta(hours=hours))
    return _make
