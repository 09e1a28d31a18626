"""Component for the title screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from whiz_app.constants.ui_constants import WELCOME_START_BUTTON, WELCOME_TITLE
from whiz_app.styling.color_palette import ColorPalette, Theme
from whiz_app.styling.styles import Styles


class WelcomePanel(QWidget):
    """Title screen leading to mode selection."""

    def __init__(self, on_start: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(WELCOME_TITLE.replace(" ", "\n", 1), self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("font-family: 'Impact'; font-size: 40pt; font-weight: bold;")
        layout.addWidget(self.title_label)

        layout.addStretch()

        self.start_button = QPushButton(WELCOME_START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_button_style(ColorPalette.SUCCESS.get(Theme.LIGHT)))
        self.start_button.clicked.connect(self.on_start)
        layout.addWidget(self.start_button, alignment=Qt.AlignHCenter)
        layout.addSpacing(50)
