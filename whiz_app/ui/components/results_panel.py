"""Component for the end-of-game summary."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from whiz_app.constants.ui_constants import RESULTS_EXIT_BUTTON, RESULTS_PLAY_AGAIN_BUTTON
from whiz_app.core.models import SessionSummary
from whiz_app.core.results_renderer import renderer
from whiz_app.styling.color_palette import ColorPalette, Theme
from whiz_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Shows the rendered results document with replay controls."""

    def __init__(
        self,
        on_play_again: Callable[[], None],
        on_exit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_play_again = on_play_again
        self.on_exit = on_exit
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.results_view = QWebEngineView(self)
        layout.addWidget(self.results_view, stretch=1)

        button_row = QHBoxLayout()
        self.play_again_button = QPushButton(RESULTS_PLAY_AGAIN_BUTTON, self)
        self.play_again_button.setStyleSheet(Styles.get_button_style(ColorPalette.SUCCESS.get(Theme.LIGHT)))
        self.play_again_button.clicked.connect(self.on_play_again)
        button_row.addWidget(self.play_again_button)

        self.exit_button = QPushButton(RESULTS_EXIT_BUTTON, self)
        self.exit_button.setStyleSheet(Styles.get_button_style(ColorPalette.DANGER.get(Theme.LIGHT)))
        self.exit_button.clicked.connect(self.on_exit)
        button_row.addWidget(self.exit_button)
        layout.addLayout(button_row)

    def show_summary(self, summary: SessionSummary) -> None:
        self.results_view.setHtml(renderer.render_summary(summary))
