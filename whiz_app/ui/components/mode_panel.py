"""Component for choosing difficulty and problem count."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from whiz_app.constants.game_constants import DEFAULT_ITEM_COUNT, DIFFICULTY_PRESETS
from whiz_app.constants.ui_constants import (
    MODE_HELP_BUTTON,
    MODE_ITEM_COUNT_LABEL,
    MODE_QUIT_BUTTON,
    MODE_TITLE,
)
from whiz_app.styling.color_palette import ColorPalette, Theme
from whiz_app.styling.styles import Styles

_PRESET_COLORS = (ColorPalette.SUCCESS, ColorPalette.ORANGE, ColorPalette.DANGER)


class ModePanel(QWidget):
    """UI component for picking a difficulty preset."""

    def __init__(
        self,
        on_start_game: Callable[[str, int], None],
        on_quit: Callable[[], None],
        on_help: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_game = on_start_game
        self.on_quit = on_quit
        self.on_help = on_help
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        title = QLabel(MODE_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(title)
        layout.addSpacing(30)

        item_row = QHBoxLayout()
        item_row.addStretch()
        item_row.addWidget(QLabel(MODE_ITEM_COUNT_LABEL, self))
        self.item_count_field = QLineEdit(str(DEFAULT_ITEM_COUNT), self)
        self.item_count_field.setMaximumWidth(60)
        item_row.addWidget(self.item_count_field)
        item_row.addStretch()
        layout.addLayout(item_row)
        layout.addSpacing(30)

        self.difficulty_buttons: list[QPushButton] = []
        for (label, difficulty_max), color in zip(DIFFICULTY_PRESETS, _PRESET_COLORS):
            button = QPushButton(label, self)
            button.setStyleSheet(Styles.get_button_style(color.get(Theme.LIGHT)))
            button.clicked.connect(lambda _=False, value=difficulty_max: self._handle_difficulty(value))
            layout.addWidget(button)
            self.difficulty_buttons.append(button)
            layout.addSpacing(20)

        layout.addStretch()
        self.help_button = QPushButton(MODE_HELP_BUTTON, self)
        self.help_button.setStyleSheet(Styles.get_button_style(ColorPalette.PRIMARY_BLUE.get(Theme.LIGHT)))
        self.help_button.clicked.connect(self.on_help)
        layout.addWidget(self.help_button, alignment=Qt.AlignHCenter)
        layout.addSpacing(20)

        self.quit_button = QPushButton(MODE_QUIT_BUTTON, self)
        self.quit_button.setStyleSheet(Styles.get_button_style(ColorPalette.TEXT_PRIMARY.get(Theme.LIGHT)))
        self.quit_button.clicked.connect(self.on_quit)
        layout.addWidget(self.quit_button, alignment=Qt.AlignHCenter)

    def _handle_difficulty(self, difficulty_max: int) -> None:
        self.on_start_game(self.item_count_field.text(), difficulty_max)
