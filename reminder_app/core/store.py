import itertools
from datetime import datetime
from PyQt6.QtCore import QObject, pyqtSignal
from reminder_app.core.config import DEFAULT_COMPLETED_TIE_BREAK
from reminder_app.core.errors import NotFoundError, ValidationError
from reminder_app.core.models import Reminder, TieBreak
from reminder_app.core.utils import generate_id, matches

def _is_aware(dt):
    return dt.tzinfo is not None and dt.utcoffset() is not None

class ReminderStore(QObject):
    """Owns the pending/completed partition of reminders and their orderings.

    `pending` is kept ascending by due instant, `completed` descending. Equal
    due instants keep creation order, or completion order for `completed`
    when the store is built with TieBreak.COMPLETION.
    """
    reminderCreated = pyqtSignal(Reminder)
    reminderCompleted = pyqtSignal(Reminder)
    changed = pyqtSignal()

    def __init__(self, tie_break=None, parent=None):
        super().__init__(parent)
        self._tie_break = TieBreak(tie_break) if tie_break is not None else DEFAULT_COMPLETED_TIE_BREAK
        self._pending = []
        self._completed = []
        self._sequence = itertools.count()
        self._completion_sequence = itertools.count()
        # naive and aware datetimes cannot be ordered together
        self._is_aware = None

    @property
    def tie_break(self):
        return self._tie_break

    def create(self, draft):
        """Validate a draft and insert the new reminder into the pending list."""
        title = (draft.title or '').strip()
        if not title:
            raise ValidationError('title', "Reminder title cannot be empty.")
        if not isinstance(draft.due_at, datetime):
            raise ValidationError('due_at', f"Invalid due date/time: {draft.due_at!r}")
        if self._is_aware is not None and _is_aware(draft.due_at) != self._is_aware:
            kind = "timezone-aware" if self._is_aware else "naive"
            raise ValidationError('due_at', f"Due date/time must be {kind} like the other reminders.")
        self._is_aware = _is_aware(draft.due_at)

        reminder = Reminder(
            generate_id(),
            title,
            draft.description or '',
            draft.due_at,
            next(self._sequence),
        )

        index = len(self._pending)
        for i, existing in enumerate(self._pending):
            if existing.due_at > reminder.due_at:
                index = i
                break
        self._pending.insert(index, reminder)

        self.reminderCreated.emit(reminder)
        self.changed.emit()
        return reminder

    def complete(self, reminder_id):
        """Move a pending reminder into the completed list."""
        index = self._index_of(self._pending, reminder_id)
        if index is None:
            raise NotFoundError(reminder_id)

        reminder = self._pending.pop(index)
        reminder._mark_completed(next(self._completion_sequence))

        position = len(self._completed)
        for i, existing in enumerate(self._completed):
            if self._precedes(reminder, existing):
                position = i
                break
        self._completed.insert(position, reminder)

        self.reminderCompleted.emit(reminder)
        self.changed.emit()

    def _precedes(self, reminder, existing):
        """Whether a newly completed reminder goes before an existing completed one."""
        if reminder.due_at != existing.due_at:
            return reminder.due_at > existing.due_at
        if self._tie_break == TieBreak.CREATION:
            return reminder.sequence < existing.sequence
        return False

    def list_pending(self):
        return tuple(self._pending)

    def list_completed(self):
        return tuple(self._completed)

    def get(self, reminder_id):
        """Look up a reminder in either collection."""
        for collection in (self._pending, self._completed):
            index = self._index_of(collection, reminder_id)
            if index is not None:
                return collection[index]
        raise NotFoundError(reminder_id, where='known')

    def search(self, search_term=""):
        """Get (pending, completed) reminders matching a search term, in list order."""
        pending = tuple(r for r in self._pending if matches(r, search_term))
        completed = tuple(r for r in self._completed if matches(r, search_term))
        return pending, completed

    def count(self):
        """Total number of reminders ever created."""
        return len(self._pending) + len(self._completed)

    @staticmethod
    def _index_of(collection, reminder_id):
        for i, reminder in enumerate(collection):
            if reminder.id == reminder_id:
                return i
        return None
