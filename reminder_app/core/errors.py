class ReminderError(Exception):
    """Base class for errors raised by the reminder core."""


class ValidationError(ReminderError):
    """A draft field does not satisfy its constraint."""
    def __init__(self, field, message):
        super().__init__(message)
        self.field = field


class NotFoundError(ReminderError):
    """No reminder with the given id exists where one was required."""
    def __init__(self, reminder_id, where='pending'):
        super().__init__(f"No {where} reminder with id {reminder_id!r}")
        self.reminder_id = reminder_id


class FlowStateError(ReminderError):
    """A creation flow action was invoked in a state that does not allow it."""
    def __init__(self, state, action):
        super().__init__(f"Cannot {action} while the creation flow is {state}")
        self.state = state
        self.action = action
