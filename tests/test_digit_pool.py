"""Tests for the digit tile pool."""

import random
from collections import Counter

import pytest

from whiz_app.core.digit_pool import answer_digits, build_digit_pool


def _digits(tiles):
    return [tile.digit for tile in tiles]


@pytest.mark.parametrize("answer", [0, 5, 10, 37, 96, 123, 1234, 5678, 9876])
def test_pool_has_ten_unique_enabled_tiles(answer):
    """Answers without repeated digits give a pool with no duplicate values."""
    tiles = build_digit_pool(answer, random.Random(answer))
    digits = _digits(tiles)
    assert len(tiles) == 10
    assert len(set(digits)) == 10
    assert all(tile.enabled for tile in tiles)
    for digit in answer_digits(answer):
        assert digit in digits


def test_short_nonzero_answer_gets_zero_decoy():
    for seed in range(20):
        assert 0 in _digits(build_digit_pool(7, random.Random(seed)))


def test_repeated_answer_digits_keep_one_tile_each():
    tiles = build_digit_pool(11, random.Random(2))
    counts = Counter(_digits(tiles))
    assert len(tiles) == 10
    assert counts[1] == 2
    assert counts[0] == 1
    assert all(count == 1 for digit, count in counts.items() if digit != 1)


def test_five_digit_answer_still_fills_pool():
    tiles = build_digit_pool(10000, random.Random(9))
    counts = Counter(_digits(tiles))
    assert len(tiles) == 10
    assert counts[0] == 4
    assert counts[1] == 1


def test_negative_answer_uses_absolute_digits():
    assert answer_digits(-42) == [4, 2]
    digits = _digits(build_digit_pool(-42, random.Random(1)))
    assert 4 in digits and 2 in digits


def test_pool_order_is_shuffled():
    orders = {tuple(_digits(build_digit_pool(0, random.Random(seed)))) for seed in range(10)}
    assert len(orders) > 1
