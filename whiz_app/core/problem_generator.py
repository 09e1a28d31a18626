"""Random arithmetic problem generation."""

from __future__ import annotations

import random

from whiz_app.constants.game_constants import EASY_OPERATORS_CEILING
from whiz_app.core.models import Operator, Problem

_EASY_OPERATORS: tuple[Operator, ...] = (Operator.ADD, Operator.SUBTRACT)
_ALL_OPERATORS: tuple[Operator, ...] = tuple(Operator)


class ProblemGenerator:
    """Draws problems with operands in ``[1, difficulty_max]``.

    Easy ceilings only use addition and subtraction, ordered so the result is
    never negative. Division problems are rebuilt from their quotient so they
    always divide exactly: the displayed first operand is ``answer * operand2``
    rather than the first draw.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, difficulty_max: int) -> Problem:
        if difficulty_max < 1:
            raise ValueError("Difficulty ceiling must be at least 1.")

        op1 = self._rng.randint(1, difficulty_max)
        op2 = self._rng.randint(1, difficulty_max)

        if difficulty_max <= EASY_OPERATORS_CEILING:
            operator = self._rng.choice(_EASY_OPERATORS)
            if operator is Operator.SUBTRACT and op1 < op2:
                op1, op2 = op2, op1
        else:
            operator = self._rng.choice(_ALL_OPERATORS)

        answer = operator.apply(op1, op2)
        if operator is Operator.DIVIDE:
            op1 = answer * op2

        return Problem(operand1=op1, operand2=op2, operator=operator, correct_answer=answer)
