from reminder_app.core.models import TieBreak

# Ordering
DEFAULT_COMPLETED_TIE_BREAK = TieBreak.CREATION

# Color Theme
BACKGROUND_COLOR = "#FFFFFF"
TEXT_COLOR = "#000000"
BUTTON_COLOR = "#000000"
BUTTON_TEXT_COLOR = "#FFFFFF"
COMPLETED_COLOR = "#479106"
NOT_COMPLETED_COLOR = "#D92A1A"
SEPARATOR_COLOR = "#CCCCCC"
INVALID_BORDER_COLOR = "#D92A1A"

# Fonts
FONT_HEADER = "Segoe UI Semibold"
FONT_HEADER_SIZE = 25
FONT_TITLE = "Segoe UI Semibold"
FONT_TITLE_SIZE = 20
FONT_LABEL = "Segoe UI"
FONT_LABEL_SIZE = 15
FONT_SMALL = "Segoe UI"
FONT_SMALL_SIZE = 12
PADDING = 10

# UI Constants
DEFAULT_DIALOG_WIDTH = 400
DEFAULT_DIALOG_HEIGHT = 420
DEFAULT_WINDOW_SIZE = (600, 900)
WINDOW_TITLE = "Reminder App"

# StyleSheets
MAIN_STYLE = f"""
QMainWindow, QDialog {{
    background-color: {BACKGROUND_COLOR};
}}
QScrollArea {{
    background-color: {BACKGROUND_COLOR};
    border: none;
}}
QLabel {{
    color: {TEXT_COLOR};
}}
QPushButton {{
    background-color: {BUTTON_COLOR};
    color: {BUTTON_TEXT_COLOR};
    border: none;
    border-radius: 5px;
    padding: 10px;
}}
QLineEdit {{
    color: {TEXT_COLOR};
    border: 2px solid {TEXT_COLOR};
    border-radius: 5px;
    padding: 6px;
}}
QDateTimeEdit {{
    color: {TEXT_COLOR};
    border: 2px solid {TEXT_COLOR};
    border-radius: 5px;
    padding: 6px;
}}
"""

INVALID_FIELD_STYLE = f"border: 2px solid {INVALID_BORDER_COLOR};"
