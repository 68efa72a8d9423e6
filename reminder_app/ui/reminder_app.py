from datetime import datetime
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QFrame, QScrollArea
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from reminder_app.core.config import (
    DEFAULT_WINDOW_SIZE, MAIN_STYLE, WINDOW_TITLE, COMPLETED_COLOR, NOT_COMPLETED_COLOR,
    SEPARATOR_COLOR, FONT_HEADER, FONT_HEADER_SIZE, FONT_TITLE, FONT_TITLE_SIZE,
    FONT_LABEL, FONT_LABEL_SIZE, FONT_SMALL, FONT_SMALL_SIZE, PADDING
)
from reminder_app.core.creation_flow import CreationFlow
from reminder_app.core.utils import format_due
from reminder_app.ui.reminder_dialog import ReminderDialog

class ReminderApp(QMainWindow):
    """Main application window."""
    def __init__(self, store):
        super().__init__()
        self.store = store
        self.flow = CreationFlow(self.store.create, parent=self)

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*DEFAULT_WINDOW_SIZE)

        self.setStyleSheet(MAIN_STYLE)

        self.init_ui()

        self.dialog = ReminderDialog(self.flow, self)

        self.store.changed.connect(self.refresh)
        self.store.reminderCreated.connect(self.on_reminder_created)
        self.store.reminderCompleted.connect(self.on_reminder_completed)

        self.refresh()

    def init_ui(self):
        """Initialize the main UI components."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(PADDING, PADDING, PADDING, PADDING)
        main_layout.setSpacing(PADDING)

        title_label = QLabel(WINDOW_TITLE)
        title_label.setFont(QFont(FONT_HEADER, FONT_HEADER_SIZE, QFont.Weight.Bold))
        main_layout.addWidget(title_label)

        self.new_reminder_btn = QPushButton("Create a New Reminder")
        self.new_reminder_btn.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
        self.new_reminder_btn.clicked.connect(self.flow.open)
        main_layout.addWidget(self.new_reminder_btn)

        self.search_entry = QLineEdit()
        self.search_entry.setPlaceholderText("Search reminders...")
        self.search_entry.textChanged.connect(lambda _text: self.refresh())
        main_layout.addWidget(self.search_entry)

        self.list_view = QScrollArea()
        self.list_view.setWidgetResizable(True)
        self.list_content = QWidget()
        self.list_layout = QVBoxLayout(self.list_content)
        self.list_layout.setSpacing(PADDING)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_view.setWidget(self.list_content)
        main_layout.addWidget(self.list_view, 1)

    def show_alert(self, message, duration=3000):
        """Log alerts to console."""
        print(f"INFO: {message}")

    def on_reminder_created(self, reminder):
        self.show_alert(f"Reminder created: {reminder.title}")

    def on_reminder_completed(self, reminder):
        self.show_alert(f"Reminder completed: {reminder.title}")

    def refresh(self):
        """Rebuild both reminder sections from the store."""
        self.clear_widget(self.list_content)

        pending, completed = self.store.search(self.search_entry.text())
        now = datetime.now()

        self.create_section_header("Pending" if pending else "None Pending")
        for reminder in pending:
            self.list_layout.addWidget(self.create_reminder_card(reminder, now))

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setStyleSheet(f"background-color: {SEPARATOR_COLOR};")
        separator.setFixedHeight(2)
        self.list_layout.addWidget(separator)

        self.create_section_header("Completed" if completed else "None Completed")
        for reminder in completed:
            self.list_layout.addWidget(self.create_reminder_card(reminder, now))

        self.list_layout.addStretch(1)

    def create_section_header(self, text):
        label = QLabel(text)
        label.setFont(QFont(FONT_TITLE, FONT_TITLE_SIZE))
        self.list_layout.addWidget(label)

    def create_reminder_card(self, reminder, now):
        """Create a card for displaying a reminder."""
        card = QFrame()
        color = NOT_COMPLETED_COLOR if reminder.is_pending() else COMPLETED_COLOR
        card.setStyleSheet(f"background-color: {color}; border-radius: 5px;")

        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(PADDING, PADDING, PADDING, PADDING)
        card_layout.setSpacing(4)

        header_layout = QHBoxLayout()

        header_left = QVBoxLayout()
        title_label = QLabel(reminder.title)
        title_label.setStyleSheet("color: white;")
        title_label.setFont(QFont(FONT_TITLE, FONT_TITLE_SIZE))
        header_left.addWidget(title_label)

        due_text = format_due(reminder.due_at)
        if reminder.is_overdue(now):
            due_text = f"{due_text} (overdue)"
        due_label = QLabel(due_text)
        due_label.setStyleSheet("color: white;")
        due_label.setFont(QFont(FONT_SMALL, FONT_SMALL_SIZE))
        header_left.addWidget(due_label)
        header_layout.addLayout(header_left, 1)

        if reminder.is_pending():
            complete_btn = QPushButton("Complete")
            complete_btn.clicked.connect(lambda checked=False, reminder_id=reminder.id: self.store.complete(reminder_id))
            header_layout.addWidget(complete_btn, alignment=Qt.AlignmentFlag.AlignTop)

        card_layout.addLayout(header_layout)

        if reminder.description:
            description_label = QLabel(reminder.description)
            description_label.setStyleSheet("color: white;")
            description_label.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
            description_label.setWordWrap(True)
            card_layout.addWidget(description_label)

        return card

    def clear_widget(self, widget):
        """Clear all child widgets from a container."""
        if widget is None:
            return

        layout = widget.layout()
        if layout is not None:
            while layout.count():
                item = layout.takeAt(0)
                if item.widget():
                    item.widget().deleteLater()

    def closeEvent(self, event):
        """Discard an unsubmitted draft when the window closes."""
        self.flow.cancel()
        super().closeEvent(event)
