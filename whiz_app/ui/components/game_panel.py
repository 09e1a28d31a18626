"""Component for playing rounds: problem, tiles, timer and controls."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from whiz_app.constants.game_constants import TILE_POOL_SIZE
from whiz_app.constants.ui_constants import (
    GAME_CANCEL_BUTTON,
    GAME_HINT_BUTTON_TEMPLATE,
    GAME_ITEM_TEMPLATE,
    GAME_RESET_BUTTON,
    GAME_SHUFFLE_BUTTON,
    GAME_SUBMIT_BUTTON,
    GAME_TIMER_TEMPLATE,
    MSG_BUILD_ANSWER,
)
from whiz_app.core.models import GameCommand, SessionSnapshot
from whiz_app.styling.color_palette import ColorPalette, Theme, ThemeColors
from whiz_app.styling.styles import Styles

_TILES_PER_ROW = 5


class GamePanel(QWidget):
    """Paints session snapshots and turns clicks into game commands."""

    def __init__(
        self,
        on_command: Callable[[GameCommand, object], None],
        on_cancel: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_command = on_command
        self.on_cancel = on_cancel
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Header: cancel, item counter, timer
        header = QHBoxLayout()
        self.cancel_button = QPushButton(GAME_CANCEL_BUTTON, self)
        self.cancel_button.setStyleSheet(
            f"color: {ColorPalette.DANGER.get(Theme.LIGHT)}; font-weight: bold; padding: 6px 10px;"
        )
        self.cancel_button.clicked.connect(self.on_cancel)
        header.addWidget(self.cancel_button)

        self.item_label = QLabel("", self)
        self.item_label.setAlignment(Qt.AlignCenter)
        self.item_label.setStyleSheet(Styles.get_large_label_style())
        header.addWidget(self.item_label, stretch=1)

        self.timer_label = QLabel("", self)
        self.timer_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.timer_label.setStyleSheet(Styles.get_timer_label_style(low_time=False))
        header.addWidget(self.timer_label)
        layout.addLayout(header)

        # Problem and answer
        self.problem_label = QLabel("", self)
        self.problem_label.setAlignment(Qt.AlignCenter)
        self.problem_label.setStyleSheet(Styles.get_problem_label_style())
        layout.addWidget(self.problem_label)

        self.answer_field = QLineEdit(self)
        self.answer_field.setReadOnly(True)
        self.answer_field.setAlignment(Qt.AlignCenter)
        self.answer_field.setMaximumWidth(200)
        self.answer_field.setStyleSheet(
            Styles.get_problem_label_style()
            + f" border: 6px solid {ColorPalette.ORANGE.get(Theme.LIGHT)}; border-radius: 10px;"
        )
        layout.addWidget(self.answer_field, alignment=Qt.AlignHCenter)

        self.progress_bar = QProgressBar(self)
        self.progress_bar.setTextVisible(True)
        layout.addWidget(self.progress_bar)

        self.feedback_label = QLabel(MSG_BUILD_ANSWER, self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        self.feedback_label.setWordWrap(True)
        self.feedback_label.setStyleSheet("font-size: 13pt; font-style: italic;")
        layout.addWidget(self.feedback_label)

        # Digit tiles
        tile_grid = QGridLayout()
        self.tile_buttons: list[QPushButton] = []
        for position in range(TILE_POOL_SIZE):
            button = QPushButton("", self)
            button.setStyleSheet(Styles.get_tile_style())
            button.clicked.connect(
                lambda _=False, pos=position: self.on_command(GameCommand.SELECT_TILE, pos)
            )
            tile_grid.addWidget(button, position // _TILES_PER_ROW, position % _TILES_PER_ROW)
            self.tile_buttons.append(button)
        layout.addLayout(tile_grid)

        # Controls
        control_row = QHBoxLayout()
        self.reset_button = self._make_control(GAME_RESET_BUTTON, ColorPalette.WARNING, GameCommand.RESET_ANSWER)
        self.submit_button = self._make_control(GAME_SUBMIT_BUTTON, ColorPalette.SUCCESS, GameCommand.SUBMIT)
        self.hint_button = self._make_control(
            GAME_HINT_BUTTON_TEMPLATE.format(count=0), ColorPalette.PURPLE, GameCommand.HINT
        )
        self.shuffle_button = self._make_control(GAME_SHUFFLE_BUTTON, ColorPalette.TEAL, GameCommand.SHUFFLE)
        for button in (self.reset_button, self.submit_button, self.hint_button, self.shuffle_button):
            control_row.addWidget(button)
        layout.addLayout(control_row)

    def _make_control(self, text: str, color: ThemeColors, command: GameCommand) -> QPushButton:
        button = QPushButton(text, self)
        button.setStyleSheet(Styles.get_button_style(color.get(Theme.LIGHT)))
        button.clicked.connect(lambda _=False: self.on_command(command, None))
        return button

    def render(self, snapshot: SessionSnapshot) -> None:
        self.item_label.setText(
            GAME_ITEM_TEMPLATE.format(current=snapshot.round_number, total=snapshot.total_items)
        )
        self.timer_label.setText(GAME_TIMER_TEMPLATE.format(seconds=snapshot.remaining_seconds))
        self.timer_label.setStyleSheet(Styles.get_timer_label_style(low_time=snapshot.low_time))
        self.problem_label.setText(snapshot.problem_text)
        self.answer_field.setText(snapshot.built_answer)
        self.progress_bar.setRange(0, max(1, snapshot.total_items))
        self.progress_bar.setValue(snapshot.progress)
        self.feedback_label.setText(snapshot.feedback)

        for button, tile in zip(self.tile_buttons, snapshot.tiles):
            button.setText(str(tile.digit))
            button.setEnabled(tile.enabled)

        self.hint_button.setText(GAME_HINT_BUTTON_TEMPLATE.format(count=snapshot.hints_remaining))
        self.hint_button.setEnabled(snapshot.hint_available)
