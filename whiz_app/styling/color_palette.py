"""Color palette for WhizQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the game screens."""

    TEXT_PRIMARY = ThemeColors(
        light="#141E28",      # Near black
        dark="#F5F5F5"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",
        dark="#1E1E1E"
    )

    BACKGROUND_PALE = ThemeColors(
        light="#DCEBFF",      # Pale blue
        dark="#26324A"
    )

    PRIMARY_BLUE = ThemeColors(
        light="#4F72CD",
        dark="#6E8FE6"
    )

    # Status colors
    SUCCESS = ThemeColors(
        light="#2E7D32",      # Deep green
        dark="#6FCF6F"
    )

    WARNING = ThemeColors(
        light="#B28704",      # Dark amber
        dark="#FFC83D"
    )

    DANGER = ThemeColors(
        light="#D32F2F",      # Deep red
        dark="#FF6B6B"
    )

    # Control colors
    ORANGE = ThemeColors(
        light="#CC6600",
        dark="#FF9933"
    )

    TEAL = ThemeColors(
        light="#00838F",
        dark="#26C6DA"
    )

    PURPLE = ThemeColors(
        light="#5E35B1",
        dark="#9575CD"
    )

    TILE_DISABLED = ThemeColors(
        light="#B8B8C8",
        dark="#4A4A5A"
    )
