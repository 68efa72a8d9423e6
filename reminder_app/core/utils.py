from datetime import datetime, timedelta
import uuid

def generate_id():
    """Generate a unique ID for reminders."""
    return str(uuid.uuid4())

def next_full_hour(now=None):
    """Return the start of the hour following `now` (default: the current local time)."""
    if now is None:
        now = datetime.now()
    return now.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)

def format_datetime(dt, format_type='time'):
    """Format datetime according to specified format type.

    Args:
        dt: The datetime object to format
        format_type: One of 'time', 'date', 'due'
    """
    if format_type == 'time':
        return dt.strftime('%I:%M %p').lstrip('0')
    elif format_type == 'date':
        return f"{dt.month}/{dt.day}/{dt.year}"
    elif format_type == 'due':
        return f"{format_datetime(dt, 'date')} - {format_datetime(dt, 'time')}"
    else:
        return str(dt)

def format_due(dt):
    """Format a due instant the way reminder cards display it."""
    return format_datetime(dt, 'due')

def matches(reminder, search_term):
    """Case-insensitive match of a search term against title and description."""
    if not search_term:
        return True
    search_term = search_term.lower()
    return search_term in reminder.title.lower() or search_term in reminder.description.lower()
