import enum

PENDING = 'Pending'
COMPLETED = 'Completed'


class TieBreak(enum.Enum):
    """How completed reminders with the same due instant are ordered."""
    CREATION = 'creation'
    COMPLETION = 'completion'


class Reminder:
    """A titled, described task with a due instant and a pending/completed status."""
    def __init__(self, reminder_id, title, description, due_at, sequence):
        self._id = reminder_id
        self.title = title
        self.description = description
        self._due_at = due_at
        self._sequence = sequence
        self._status = PENDING
        self._completion_sequence = None

    @property
    def id(self):
        return self._id

    @property
    def due_at(self):
        return self._due_at

    @property
    def sequence(self):
        """Creation order within the owning store."""
        return self._sequence

    @property
    def status(self):
        return self._status

    @property
    def completion_sequence(self):
        """Completion order within the owning store, None while pending."""
        return self._completion_sequence

    def _mark_completed(self, completion_sequence):
        """Only ReminderStore.complete may move a reminder out of pending."""
        self._status = COMPLETED
        self._completion_sequence = completion_sequence

    def is_pending(self):
        return self._status == PENDING

    def is_completed(self):
        return self._status == COMPLETED

    def is_overdue(self, now):
        """True for a pending reminder whose due instant has already passed."""
        return self.is_pending() and self._due_at < now

    def __repr__(self):
        return f"Reminder(id={self._id!r}, title={self.title!r}, due_at={self._due_at!r}, status={self._status!r})"


class Draft:
    """Field values of a reminder that has not been created yet."""
    def __init__(self, title='', description='', due_at=None):
        self.title = title
        self.description = description
        self.due_at = due_at

    def copy(self):
        return Draft(self.title, self.description, self.due_at)

    def __eq__(self, other):
        if not isinstance(other, Draft):
            return NotImplemented
        return (self.title, self.description, self.due_at) == (other.title, other.description, other.due_at)

    def __repr__(self):
        return f"Draft(title={self.title!r}, description={self.description!r}, due_at={self.due_at!r})"
