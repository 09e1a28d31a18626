"""Domain models for the arithmetic challenge."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Operator(Enum):
    """Arithmetic operator with its display symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    @property
    def symbol(self) -> str:
        return self.value

    def apply(self, left: int, right: int) -> int:
        """Evaluate ``left <op> right`` using integer division for DIVIDE."""
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        return left // right


@dataclass(frozen=True, slots=True)
class Problem:
    """A generated arithmetic problem and its integer answer."""

    operand1: int
    operand2: int
    operator: Operator
    correct_answer: int

    @property
    def text(self) -> str:
        return f"{self.operand1} {self.operator.symbol} {self.operand2}"


@dataclass(slots=True)
class DigitTile:
    """A selectable digit; disabled once used in the current answer."""

    digit: int
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of one round. Timed-out rounds record ``user_answer`` as 0."""

    user_answer: int
    correct_answer: int
    was_correct: bool
    was_timed_out: bool = False
    points_awarded: int = 0


class SessionState(Enum):
    """Lifecycle state of a game session."""

    SELECTING_MODE = auto()
    IN_ROUND = auto()
    SHOWING_FEEDBACK = auto()
    FINISHED = auto()


class GameCommand(Enum):
    """Player input routed to :meth:`GameSession.dispatch`."""

    START = auto()
    SELECT_TILE = auto()
    SUBMIT = auto()
    HINT = auto()
    SHUFFLE = auto()
    RESET_ANSWER = auto()
    CANCEL = auto()


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """Final results exposed once a session is finished."""

    score: int
    total_items: int
    history: tuple[RoundResult, ...]

    @property
    def correct_count(self) -> int:
        return sum(1 for result in self.history if result.was_correct)

    @property
    def correctness(self) -> list[bool]:
        return [result.was_correct for result in self.history]

    @property
    def passed(self) -> bool:
        return self.correct_count >= self.total_items / 2


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable view of a session handed to renderers."""

    state: SessionState
    round_number: int = 0
    total_items: int = 0
    problem_text: str = ""
    tiles: tuple[DigitTile, ...] = ()
    built_answer: str = ""
    remaining_seconds: int = 0
    low_time: bool = False
    feedback: str = ""
    hints_remaining: int = 0
    hint_available: bool = False
    score: int = 0
    streak: int = 0
    progress: int = 0
    summary: SessionSummary | None = None
    history: tuple[RoundResult, ...] = field(default_factory=tuple)
