from datetime import datetime
from PyQt6.QtCore import QObject, pyqtSignal
from reminder_app.core.errors import FlowStateError, ValidationError
from reminder_app.core.models import Draft
from reminder_app.core.utils import next_full_hour

CLOSED = 'Closed'
OPEN = 'Open'

class CreationFlow(QObject):
    """Collects a reminder draft while the create dialog is open.

    `submit()` hands a copy of the draft to `on_creation` and closes the flow.
    An empty title keeps the flow open and marks the title as invalid.
    """
    visibilityChanged = pyqtSignal(bool)
    validationFailed = pyqtSignal(str)
    submitted = pyqtSignal()

    def __init__(self, on_creation, clock=None, parent=None):
        super().__init__(parent)
        self.on_creation = on_creation
        self.clock = clock or datetime.now
        self._state = CLOSED
        self._draft = self._fresh_draft()
        self._invalid_field = None

    @property
    def state(self):
        return self._state

    @property
    def is_open(self):
        return self._state == OPEN

    @property
    def draft(self):
        return self._draft.copy()

    @property
    def invalid_field(self):
        return self._invalid_field

    def _fresh_draft(self):
        return Draft('', '', next_full_hour(self.clock()))

    def _reset(self):
        self._draft = self._fresh_draft()
        self._invalid_field = None

    def _require_open(self, action):
        if self._state != OPEN:
            raise FlowStateError(self._state, action)

    def open(self):
        """Show the dialog with an empty draft."""
        if self._state == OPEN:
            return
        self._reset()
        self._state = OPEN
        self.visibilityChanged.emit(True)

    def cancel(self):
        """Dismiss the dialog without creating anything."""
        if self._state == CLOSED:
            return
        self._state = CLOSED
        self._reset()
        self.visibilityChanged.emit(False)

    def set_title(self, title):
        self._require_open("edit the title")
        self._draft.title = title
        if self._invalid_field == 'title':
            self._invalid_field = None

    def set_description(self, description):
        self._require_open("edit the description")
        self._draft.description = description

    def set_due_at(self, due_at):
        self._require_open("edit the due date")
        self._draft.due_at = due_at
        if self._invalid_field == 'due_at':
            self._invalid_field = None

    def submit(self):
        """Validate the draft, pass it to `on_creation` and close the dialog."""
        self._require_open("submit")

        if not self._draft.title.strip():
            self._invalid_field = 'title'
            self.validationFailed.emit('title')
            raise ValidationError('title', "Reminder title cannot be empty.")

        # on_creation errors leave the draft and the dialog as they are
        try:
            result = self.on_creation(self._draft.copy())
        except ValidationError as e:
            self._invalid_field = e.field
            self.validationFailed.emit(e.field)
            raise

        self._state = CLOSED
        self._reset()
        self.submitted.emit()
        self.visibilityChanged.emit(False)
        return result
