"""Qt UI components for the game."""

from .dialog_helpers import confirm_cancel_game, show_info
from .main_window import WhizMainWindow
from .qt_scheduler import QtScheduler

__all__ = [
    "WhizMainWindow",
    "QtScheduler",
    "confirm_cancel_game",
    "show_info",
]
