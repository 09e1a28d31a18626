"""Builds the digit tiles a player assembles an answer from."""

from __future__ import annotations

import random

from whiz_app.constants.game_constants import MAX_ANSWER_LENGTH, TILE_POOL_SIZE
from whiz_app.core.models import DigitTile


def answer_digits(answer: int) -> list[int]:
    """Return the decimal digits of ``abs(answer)`` in order."""
    return [int(char) for char in str(abs(answer))]


def build_digit_pool(answer: int, rng: random.Random | None = None) -> list[DigitTile]:
    """Return ``TILE_POOL_SIZE`` shuffled, enabled tiles for ``answer``.

    The pool holds one tile per digit occurrence of the answer, an extra ``0``
    decoy for short non-zero answers, and distractors that never repeat a
    digit value already present.

    Distractor sampling always terminates: the number of distractors needed is
    ``TILE_POOL_SIZE - len(required)`` while the number of unused digit values
    is ``10 - len(set(required))``, which is never smaller.
    """
    rng = rng or random.Random()
    required = answer_digits(answer)
    if answer != 0 and 0 not in required and len(required) < MAX_ANSWER_LENGTH:
        required.append(0)

    pool = list(required)
    for _ in range(max(0, TILE_POOL_SIZE - len(required))):
        digit = rng.randint(0, 9)
        while digit in pool:
            digit = rng.randint(0, 9)
        pool.append(digit)

    rng.shuffle(pool)
    return [DigitTile(digit=digit) for digit in pool]
