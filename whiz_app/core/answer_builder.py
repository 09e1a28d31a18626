"""Scratch state for the answer a player builds from digit tiles."""

from __future__ import annotations

import random

from whiz_app.constants.game_constants import MAX_ANSWER_LENGTH
from whiz_app.core.models import DigitTile


class AnswerBuilder:
    """Accumulates tapped digits and tracks which tiles have been used."""

    def __init__(self, tiles: list[DigitTile], max_length: int = MAX_ANSWER_LENGTH) -> None:
        self._tiles = tiles
        self._max_length = max_length
        self._text = ""

    @property
    def text(self) -> str:
        return self._text

    @property
    def tiles(self) -> list[DigitTile]:
        return list(self._tiles)

    def is_full(self) -> bool:
        return len(self._text) >= self._max_length

    def append_tile(self, position: int) -> bool:
        """Use the tile at ``position``. Returns False if full or already used."""
        if not 0 <= position < len(self._tiles):
            raise IndexError(f"Tile position {position} out of range")
        tile = self._tiles[position]
        if self.is_full() or not tile.enabled:
            return False
        tile.enabled = False
        self._text += str(tile.digit)
        return True

    def append_digit(self, digit: int) -> bool:
        """Use the first enabled tile showing ``digit``.

        Returns False without changing anything when the answer is full or no
        enabled tile shows the digit.
        """
        if self.is_full():
            return False
        position = self.find_enabled_tile(digit)
        if position is None:
            return False
        return self.append_tile(position)

    def find_enabled_tile(self, digit: int) -> int | None:
        return next(
            (idx for idx, tile in enumerate(self._tiles) if tile.enabled and tile.digit == digit),
            None,
        )

    def reset(self) -> None:
        self._text = ""
        for tile in self._tiles:
            tile.enabled = True

    def disable_all(self) -> None:
        for tile in self._tiles:
            tile.enabled = False

    def current_value(self) -> int | None:
        """Parse the built answer; ``None`` means nothing has been entered."""
        if not self._text:
            return None
        return int(self._text)

    def shuffle(self, rng: random.Random) -> None:
        """Shuffle enabled tiles; used tiles keep their order at the end."""
        enabled = [tile for tile in self._tiles if tile.enabled]
        disabled = [tile for tile in self._tiles if not tile.enabled]
        rng.shuffle(enabled)
        self._tiles[:] = enabled + disabled
