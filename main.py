import sys
from PyQt6.QtWidgets import QApplication
from reminder_app.core.store import ReminderStore
from reminder_app.ui.reminder_app import ReminderApp

def main():
    """Main entry point for the application."""
    # One store per session, shared with the window
    store = ReminderStore()

    # Create and start the application
    app = QApplication(sys.argv)

    # Set style to fusion for better appearance
    app.setStyle("Fusion")

    # Create and show main window
    main_window = ReminderApp(store)
    main_window.show()

    # Start the event loop
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
