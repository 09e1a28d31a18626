"""Score, streak and round history for a single game."""

from __future__ import annotations

from whiz_app.core.models import RoundResult, SessionSummary


class Scoreboard:
    """Applies the streak bonus and records every round outcome."""

    def __init__(self) -> None:
        self._score: int = 0
        self._streak: int = 0
        self._history: list[RoundResult] = []

    @property
    def score(self) -> int:
        return self._score

    @property
    def streak(self) -> int:
        return self._streak

    def get_history(self) -> list[RoundResult]:
        return list(self._history)

    def record_answer(self, user_answer: int, correct_answer: int) -> RoundResult:
        """Score a submitted answer.

        A correct answer is worth the streak length before this round, with a
        minimum of 1 point. A wrong answer resets the streak.
        """
        is_correct = user_answer == correct_answer
        points = 0
        if is_correct:
            points = max(self._streak, 1)
            self._score += points
            self._streak += 1
        else:
            self._streak = 0

        result = RoundResult(
            user_answer=user_answer,
            correct_answer=correct_answer,
            was_correct=is_correct,
            points_awarded=points,
        )
        self._history.append(result)
        return result

    def record_timeout(self, correct_answer: int) -> RoundResult:
        """Record an unanswered round; never correct, always breaks the streak."""
        self._streak = 0
        result = RoundResult(
            user_answer=0,
            correct_answer=correct_answer,
            was_correct=False,
            was_timed_out=True,
        )
        self._history.append(result)
        return result

    def build_summary(self, total_items: int) -> SessionSummary:
        return SessionSummary(score=self._score, total_items=total_items, history=tuple(self._history))

    def clear(self) -> None:
        """Reset score, streak and history for a new game."""
        self._score = 0
        self._streak = 0
        self._history.clear()
