"""Shared fixtures: a virtual-time scheduler and a scriptable RNG."""

import random

import pytest

from whiz_app.core.services.scheduler import VirtualScheduler


class ScriptedRandom(random.Random):
    """Random source that replays queued values before falling back to a seed."""

    def __init__(self, *, randints=(), choices=(), seed=1234):
        super().__init__(seed)
        self._randints = list(randints)
        self._choices = list(choices)

    def randint(self, a, b):
        if self._randints:
            value = self._randints.pop(0)
            assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
            return value
        return super().randint(a, b)

    def choice(self, seq):
        if self._choices:
            value = self._choices.pop(0)
            assert value in seq, f"scripted {value} not in {seq}"
            return value
        return super().choice(seq)


@pytest.fixture
def scheduler():
    return VirtualScheduler()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
