"""Qt main window switching between the welcome, mode, game and results screens."""

from __future__ import annotations

from enum import Enum, auto
import random

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from whiz_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from whiz_app.constants.ui_constants import WINDOW_MIN_HEIGHT, WINDOW_MIN_WIDTH, WINDOW_TITLE
from whiz_app.core.models import GameCommand, SessionSnapshot, SessionState
from whiz_app.core.services.game_session import GameSession
from whiz_app.ui.components.game_panel import GamePanel
from whiz_app.ui.components.mode_panel import ModePanel
from whiz_app.ui.components.results_panel import ResultsPanel
from whiz_app.ui.components.welcome_panel import WelcomePanel
from whiz_app.ui.dialog_helpers import confirm_cancel_game, show_info
from whiz_app.ui.qt_scheduler import QtScheduler
from whiz_app.styling.styles import Styles


class Screen(Enum):
    """Top-level screen shown in the window."""

    WELCOME = auto()
    MODE_SELECTION = auto()
    GAME = auto()
    RESULTS = auto()


class WhizMainWindow(QMainWindow):
    """Main Qt window rendering a :class:`GameSession`."""

    def __init__(self, seed: int | None = None) -> None:
        super().__init__()
        self.setWindowTitle(f"{WINDOW_TITLE} - {APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        self.session = GameSession(QtScheduler(self), random.Random(seed))
        self.session.subscribe(self._handle_snapshot)
        self._screen = Screen.WELCOME

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())

    def _build_ui(self) -> None:
        self.screen_stack = QStackedWidget(self)
        self.setCentralWidget(self.screen_stack)

        self.welcome_panel = WelcomePanel(
            on_start=lambda: self._set_screen(Screen.MODE_SELECTION),
            parent=self,
        )
        self.mode_panel = ModePanel(
            on_start_game=self._handle_start_game,
            on_quit=self.close,
            on_help=self._handle_help,
            parent=self,
        )
        self.game_panel = GamePanel(
            on_command=self.session.dispatch,
            on_cancel=self._handle_cancel,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            on_play_again=self.session.cancel,
            on_exit=self.close,
            parent=self,
        )

        self.screen_stack.addWidget(self.welcome_panel)
        self.screen_stack.addWidget(self.mode_panel)
        self.screen_stack.addWidget(self.game_panel)
        self.screen_stack.addWidget(self.results_panel)

        self._set_screen(Screen.WELCOME)

    def _set_screen(self, screen: Screen) -> None:
        self._screen = screen
        index_map = {
            Screen.WELCOME: 0,
            Screen.MODE_SELECTION: 1,
            Screen.GAME: 2,
            Screen.RESULTS: 3,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])

    def _handle_start_game(self, item_count_raw: str, difficulty_max: int) -> None:
        self.session.dispatch(GameCommand.START, (item_count_raw, difficulty_max))

    def _handle_cancel(self) -> None:
        if confirm_cancel_game(self):
            self.session.dispatch(GameCommand.CANCEL)

    def _handle_help(self) -> None:
        details = f"{HELP_TEXT}\n\n{APP_ABOUT_TEXT}\n\n{APP_NAME} v{APP_VERSION} - {APP_LICENSE}"
        show_info(self, f"How to play {APP_NAME}", details)

    def _handle_snapshot(self, snapshot: SessionSnapshot) -> None:
        if snapshot.state in (SessionState.IN_ROUND, SessionState.SHOWING_FEEDBACK):
            self.game_panel.render(snapshot)
            if self._screen is not Screen.GAME:
                self._set_screen(Screen.GAME)
        elif snapshot.state is SessionState.FINISHED:
            if self._screen is not Screen.RESULTS and snapshot.summary is not None:
                self.results_panel.show_summary(snapshot.summary)
                self._set_screen(Screen.RESULTS)
        elif self._screen is not Screen.WELCOME:
            self._set_screen(Screen.MODE_SELECTION)

    def closeEvent(self, event: QCloseEvent) -> None:
        # Pending countdown/feedback timers must not fire into a closing window.
        self.session.cancel()
        super().closeEvent(event)
