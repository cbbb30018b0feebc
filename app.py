import logging
import os
import sys
from PySide6.QtWidgets import QApplication
from BackEnd.services.app_state import AppState
from FrontEnd.ui_main import MainWindow


def configure_logging():
    level = os.environ.get("FLOW_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    configure_logging()
    app = QApplication(sys.argv)
    state = AppState().load()
    win = MainWindow(state)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
