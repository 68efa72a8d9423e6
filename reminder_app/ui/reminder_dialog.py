from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QDateTimeEdit
)
from PyQt6.QtCore import Qt, QDate, QDateTime, QTime
from PyQt6.QtGui import QFont

from reminder_app.core.config import (
    FONT_TITLE, FONT_TITLE_SIZE, FONT_SMALL, FONT_SMALL_SIZE, FONT_LABEL, FONT_LABEL_SIZE,
    DEFAULT_DIALOG_WIDTH, DEFAULT_DIALOG_HEIGHT, MAIN_STYLE, INVALID_FIELD_STYLE
)
from reminder_app.core.errors import ValidationError

class ReminderDialog(QDialog):
    """Dialog that edits the draft of a CreationFlow and submits it."""
    def __init__(self, flow, parent=None):
        super().__init__(parent)
        self.flow = flow

        self.setWindowTitle("Create Reminder")
        self.setModal(True)
        self.setFixedSize(DEFAULT_DIALOG_WIDTH, DEFAULT_DIALOG_HEIGHT)
        self.setStyleSheet(MAIN_STYLE)

        if parent:
            parent_rect = parent.geometry()
            x = parent_rect.x() + (parent_rect.width() - DEFAULT_DIALOG_WIDTH) // 2
            y = parent_rect.y() + (parent_rect.height() - DEFAULT_DIALOG_HEIGHT) // 2
            self.setGeometry(x, y, DEFAULT_DIALOG_WIDTH, DEFAULT_DIALOG_HEIGHT)

        self.init_ui()

        self.flow.visibilityChanged.connect(self.on_visibility_changed)
        self.flow.validationFailed.connect(self.highlight_field)

    def init_ui(self):
        """Create and arrange all dialog widgets."""
        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(10)

        header_label = QLabel("Create Reminder")
        header_label.setFont(QFont(FONT_TITLE, FONT_TITLE_SIZE))
        main_layout.addWidget(header_label)

        main_layout.addWidget(self._field_label("Title"))
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Title")
        self.title_edit.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
        self.title_edit.textChanged.connect(self.on_title_changed)
        main_layout.addWidget(self.title_edit)

        main_layout.addWidget(self._field_label("Description"))
        self.description_edit = QLineEdit()
        self.description_edit.setPlaceholderText("Description")
        self.description_edit.setFont(QFont(FONT_LABEL, FONT_LABEL_SIZE))
        self.description_edit.textChanged.connect(self.flow.set_description)
        main_layout.addWidget(self.description_edit)

        main_layout.addWidget(self._field_label("Date and Time"))
        self.due_edit = QDateTimeEdit()
        self.due_edit.setCalendarPopup(True)
        self.due_edit.setDisplayFormat("M/d/yyyy - h:mm AP")
        self.due_edit.dateTimeChanged.connect(self.on_due_changed)
        main_layout.addWidget(self.due_edit, alignment=Qt.AlignmentFlag.AlignCenter)

        main_layout.addStretch(1)

        button_layout = QHBoxLayout()
        create_btn = QPushButton("Create")
        create_btn.clicked.connect(self.confirm)
        button_layout.addWidget(create_btn)
        main_layout.addLayout(button_layout)

    def _field_label(self, text):
        label = QLabel(text)
        label.setFont(QFont(FONT_SMALL, FONT_SMALL_SIZE))
        return label

    def load_draft(self):
        """Fill the widgets from the flow's current draft."""
        draft = self.flow.draft
        self.title_edit.setText(draft.title)
        self.description_edit.setText(draft.description)
        due = draft.due_at
        self.due_edit.setDateTime(QDateTime(QDate(due.year, due.month, due.day), QTime(due.hour, due.minute)))
        self.clear_highlight()

    def on_visibility_changed(self, visible):
        if visible:
            self.load_draft()
            self.show()
            self.title_edit.setFocus()
        elif self.isVisible():
            self.accept()

    def on_title_changed(self, text):
        self.flow.set_title(text)
        self.clear_highlight()

    def on_due_changed(self, qdatetime):
        self.flow.set_due_at(qdatetime.toPyDateTime())

    def highlight_field(self, field):
        """Mark the widget of an invalid draft field."""
        if field == 'title':
            self.title_edit.setStyleSheet(INVALID_FIELD_STYLE)
        elif field == 'due_at':
            self.due_edit.setStyleSheet(INVALID_FIELD_STYLE)

    def clear_highlight(self):
        self.title_edit.setStyleSheet("")
        self.due_edit.setStyleSheet("")

    def confirm(self):
        """Submit the draft; an invalid field keeps the dialog open."""
        try:
            self.flow.submit()
        except ValidationError as e:
            print(f"Warning: {e}")

    def reject(self):
        """Dismissing the dialog discards the draft."""
        # hide first so the flow's visibilityChanged(False) does not accept()
        super().reject()
        self.flow.cancel()
