# Core modules initialization
from reminder_app.core.creation_flow import CreationFlow
from reminder_app.core.errors import FlowStateError, NotFoundError, ValidationError
from reminder_app.core.models import Draft, Reminder, TieBreak
from reminder_app.core.store import ReminderStore

__all__ = ['CreationFlow', 'Draft', 'FlowStateError', 'NotFoundError', 'Reminder', 'ReminderStore', 'TieBreak', 'ValidationError']
