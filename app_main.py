"""Application entry point for WhizQt."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from whiz_app.constants.about import APP_NAME, APP_VERSION
from whiz_app.ui.main_window import WhizMainWindow
from whiz_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s v%s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    window = WhizMainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
