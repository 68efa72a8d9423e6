# UI modules initialization
from reminder_app.ui.reminder_dialog import ReminderDialog
from reminder_app.ui.reminder_app import ReminderApp

__all__ = ['ReminderDialog', 'ReminderApp']
