"""Centralized Qt stylesheets for the game screens."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Verdana', 'Segoe UI', sans-serif;
                font-size: 14px;
            }}
            QLineEdit {{
                border: 3px solid {ColorPalette.TEAL.get(theme)};
                border-radius: 6px;
                padding: 4px;
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.TEXT_PRIMARY.get(theme)};
                border-radius: 4px;
                background-color: {ColorPalette.BACKGROUND_PALE.get(theme)};
                text-align: center;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.PRIMARY_BLUE.get(theme)};
            }}
        """

    @staticmethod
    def get_button_style(color: str) -> str:
        return (
            f"QPushButton {{ background-color: {color}; color: #FFFFFF; font: bold 16pt 'Arial';"
            " border-radius: 8px; padding: 10px 20px; }"
            " QPushButton:disabled { background-color: #9E9E9E; }"
        )

    @staticmethod
    def get_tile_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.PURPLE.get(theme)}; color: #FFFFFF;"
            " font: bold 22pt 'Monospace'; border: 2px solid #000000; border-radius: 8px;"
            " min-width: 52px; min-height: 52px; }"
            f" QPushButton:disabled {{ background-color: {ColorPalette.TILE_DISABLED.get(theme)}; }}"
        )

    @staticmethod
    def get_timer_label_style(low_time: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.DANGER.get(theme) if low_time else ColorPalette.TEAL.get(theme)
        return f"font-size: 16pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_problem_label_style() -> str:
        return "font-family: 'Monospace'; font-size: 40pt; font-weight: bold;"
