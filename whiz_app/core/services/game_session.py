"""Service orchestrating rounds, scoring, hints and timing for one game."""

from __future__ import annotations

import logging
import random
from typing import Callable

from whiz_app.constants.game_constants import (
    DEFAULT_ITEM_COUNT,
    FEEDBACK_DELAY_SECONDS,
    HINTS_PER_GAME,
    LOW_TIME_WARNING_SECONDS,
    MAX_ITEM_COUNT,
    MIN_ITEM_COUNT,
)
from whiz_app.constants.ui_constants import (
    MSG_BUILD_ANSWER,
    MSG_CORRECT_TEMPLATE,
    MSG_EMPTY_ANSWER,
    MSG_HINT_NOT_APPLIED,
    MSG_HINT_USED_TEMPLATE,
    MSG_INCORRECT_TEMPLATE,
    MSG_KEEP_BUILDING,
    MSG_MAX_LENGTH,
    MSG_NO_HINTS,
    MSG_SHUFFLED,
    MSG_TILE_UNAVAILABLE,
    MSG_TILES_RESET,
    MSG_TIMED_OUT_TEMPLATE,
    MSG_UNREADABLE_ANSWER,
)
from whiz_app.core.answer_builder import AnswerBuilder
from whiz_app.core.digit_pool import answer_digits, build_digit_pool
from whiz_app.core.models import (
    DigitTile,
    GameCommand,
    Problem,
    RoundResult,
    SessionSnapshot,
    SessionState,
    SessionSummary,
)
from whiz_app.core.problem_generator import ProblemGenerator
from whiz_app.core.services.round_timer import RoundTimer
from whiz_app.core.services.scheduler import ScheduledCall, Scheduler
from whiz_app.core.services.scoreboard import Scoreboard

logger = logging.getLogger(__name__)

SessionListener = Callable[[SessionSnapshot], None]


def parse_item_count(raw: str | int | None) -> int:
    """Clamp a requested problem count to the allowed range.

    Anything that does not parse as an integer falls back to the default.
    """
    try:
        requested = int(str(raw).strip())
    except ValueError:
        return DEFAULT_ITEM_COUNT
    return min(MAX_ITEM_COUNT, max(MIN_ITEM_COUNT, requested))


class GameSession:
    """Manages the state of a single-player arithmetic challenge.

    All transitions happen on the thread that delivers player input and
    scheduler callbacks. Every state change is pushed to subscribed listeners
    as a :class:`SessionSnapshot`.
    """

    def __init__(self, scheduler: Scheduler, rng: random.Random | None = None) -> None:
        self._scheduler = scheduler
        self._rng = rng or random.Random()
        self._generator = ProblemGenerator(self._rng)
        self._scoreboard = Scoreboard()
        self._timer = RoundTimer(scheduler, on_expire=self._handle_timeout, on_tick=self._handle_tick)
        self._listeners: list[SessionListener] = []

        self._state: SessionState = SessionState.SELECTING_MODE
        self._total_items: int = 0
        self._difficulty_max: int = 0
        self._round_index: int = 0
        self._hints_remaining: int = 0
        self._problem: Problem | None = None
        self._builder: AnswerBuilder | None = None
        self._feedback: str = ""
        self._advance_call: ScheduledCall | None = None

        self._handlers: dict[GameCommand, Callable[..., bool]] = {
            GameCommand.START: self._dispatch_start,
            GameCommand.SELECT_TILE: self.select_tile,
            GameCommand.SUBMIT: self.submit,
            GameCommand.HINT: self.hint,
            GameCommand.SHUFFLE: self.shuffle,
            GameCommand.RESET_ANSWER: self.reset_answer,
            GameCommand.CANCEL: self.cancel,
        }

    # --- Observation ---

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def score(self) -> int:
        return self._scoreboard.score

    @property
    def streak(self) -> int:
        return self._scoreboard.streak

    @property
    def hints_remaining(self) -> int:
        return self._hints_remaining

    @property
    def total_items(self) -> int:
        return self._total_items

    @property
    def difficulty_max(self) -> int:
        return self._difficulty_max

    @property
    def round_index(self) -> int:
        return self._round_index

    @property
    def current_problem(self) -> Problem | None:
        return self._problem

    @property
    def built_answer(self) -> str:
        return self._builder.text if self._builder else ""

    @property
    def remaining_seconds(self) -> int:
        return self._timer.remaining_seconds

    @property
    def feedback(self) -> str:
        return self._feedback

    def get_history(self) -> list[RoundResult]:
        return self._scoreboard.get_history()

    def summary(self) -> SessionSummary | None:
        """Final results, available once the session is finished."""
        if self._state is not SessionState.FINISHED:
            return None
        return self._scoreboard.build_summary(self._total_items)

    def snapshot(self) -> SessionSnapshot:
        in_game = self._state in (SessionState.IN_ROUND, SessionState.SHOWING_FEEDBACK)
        remaining = self._timer.remaining_seconds if in_game else 0
        progress = self._total_items if self._state is SessionState.FINISHED else self._round_index
        return SessionSnapshot(
            state=self._state,
            round_number=self._round_index + 1 if in_game else 0,
            total_items=self._total_items,
            problem_text=self._problem.text if self._problem and in_game else "",
            tiles=tuple(DigitTile(digit=tile.digit, enabled=tile.enabled) for tile in self._builder.tiles)
            if self._builder and in_game
            else (),
            built_answer=self.built_answer if in_game else "",
            remaining_seconds=remaining,
            low_time=in_game and remaining <= LOW_TIME_WARNING_SECONDS,
            feedback=self._feedback,
            hints_remaining=self._hints_remaining,
            hint_available=self._state is SessionState.IN_ROUND and self._hints_remaining > 0,
            score=self._scoreboard.score,
            streak=self._scoreboard.streak,
            progress=progress,
            summary=self.summary(),
            history=tuple(self._scoreboard.get_history()),
        )

    # --- Commands ---

    def dispatch(self, command: GameCommand, argument: object = None) -> bool:
        """Route a typed player command to its handler."""
        handler = self._handlers[command]
        if command in (GameCommand.SELECT_TILE, GameCommand.SUBMIT, GameCommand.START):
            return handler(argument)
        return handler()

    def start_game(self, item_count_raw: str | int | None, difficulty_max: int) -> bool:
        """Begin a new game, superseding any game in progress."""
        if difficulty_max < 1:
            raise ValueError("Difficulty ceiling must be at least 1.")
        self._cancel_pending()

        self._total_items = parse_item_count(item_count_raw)
        self._difficulty_max = difficulty_max
        self._round_index = 0
        self._hints_remaining = HINTS_PER_GAME
        self._scoreboard.clear()

        logger.info("Starting game: %d problems up to %d", self._total_items, difficulty_max)
        self._begin_round()
        return True

    def select_tile(self, position: int) -> bool:
        """Add the tile at ``position`` to the answer being built."""
        if not self._require_round():
            return False
        if self._builder.is_full():
            return self._reject(MSG_MAX_LENGTH)
        if not self._builder.append_tile(position):
            return self._reject(MSG_TILE_UNAVAILABLE)
        self._set_feedback(MSG_KEEP_BUILDING)
        return True

    def submit(self, answer_text: str | None = None) -> bool:
        """Submit ``answer_text``, or the built answer when omitted."""
        if not self._require_round():
            return False
        text = self._builder.text if answer_text is None else answer_text.strip()
        if not text:
            return self._reject(MSG_EMPTY_ANSWER)
        try:
            user_answer = int(text)
        except ValueError:
            return self._reject(MSG_UNREADABLE_ANSWER)

        self._timer.cancel()
        result = self._scoreboard.record_answer(user_answer, self._problem.correct_answer)
        if result.was_correct:
            self._feedback = MSG_CORRECT_TEMPLATE.format(points=result.points_awarded)
        else:
            self._feedback = MSG_INCORRECT_TEMPLATE.format(answer=result.correct_answer)
        logger.debug(
            "Round %d answered %d (correct %d): %s",
            self._round_index + 1,
            user_answer,
            result.correct_answer,
            "correct" if result.was_correct else "incorrect",
        )
        self._finish_round()
        return True

    def hint(self) -> bool:
        """Reveal the next digit of the answer using one matching tile."""
        if not self._require_round():
            return False
        if self._hints_remaining <= 0:
            return self._reject(MSG_NO_HINTS)

        digits = answer_digits(self._problem.correct_answer)
        position = len(self._builder.text)
        applied = position < len(digits) and self._builder.append_digit(digits[position])
        if not applied:
            return self._reject(MSG_HINT_NOT_APPLIED)

        self._hints_remaining -= 1
        self._set_feedback(MSG_HINT_USED_TEMPLATE.format(count=self._hints_remaining))
        return True

    def shuffle(self) -> bool:
        if not self._require_round():
            return False
        self._builder.shuffle(self._rng)
        self._set_feedback(MSG_SHUFFLED)
        return True

    def reset_answer(self) -> bool:
        if not self._require_round():
            return False
        self._builder.reset()
        self._set_feedback(MSG_TILES_RESET)
        return True

    def cancel(self) -> bool:
        """Abandon the current game and return to mode selection."""
        if self._state is SessionState.IN_ROUND or self._state is SessionState.SHOWING_FEEDBACK:
            logger.info("Game cancelled at problem %d of %d", self._round_index + 1, self._total_items)
        self._cancel_pending()
        self._state = SessionState.SELECTING_MODE
        self._problem = None
        self._builder = None
        self._set_feedback("")
        return True

    # --- Transitions ---

    def _dispatch_start(self, argument: object) -> bool:
        item_count_raw, difficulty_max = argument
        return self.start_game(item_count_raw, difficulty_max)

    def _begin_round(self) -> None:
        self._problem = self._generator.generate(self._difficulty_max)
        self._builder = AnswerBuilder(build_digit_pool(self._problem.correct_answer, self._rng))
        self._state = SessionState.IN_ROUND
        self._feedback = MSG_BUILD_ANSWER
        self._timer.start()
        self._notify()

    def _handle_tick(self, remaining_seconds: int) -> None:
        if self._state is SessionState.IN_ROUND and remaining_seconds > 0:
            self._notify()

    def _handle_timeout(self) -> None:
        if self._state is not SessionState.IN_ROUND:
            return
        result = self._scoreboard.record_timeout(self._problem.correct_answer)
        self._feedback = MSG_TIMED_OUT_TEMPLATE.format(answer=result.correct_answer)
        logger.debug("Round %d timed out", self._round_index + 1)
        self._finish_round()

    def _finish_round(self) -> None:
        self._builder.disable_all()
        self._state = SessionState.SHOWING_FEEDBACK
        self._advance_call = self._scheduler.call_later(FEEDBACK_DELAY_SECONDS, self._advance)
        self._notify()

    def _advance(self) -> None:
        if self._state is not SessionState.SHOWING_FEEDBACK:
            return
        self._advance_call = None
        self._round_index += 1
        if self._round_index < self._total_items:
            self._begin_round()
            return

        self._state = SessionState.FINISHED
        self._feedback = ""
        summary = self._scoreboard.build_summary(self._total_items)
        logger.info(
            "Game finished: %d points, %d / %d correct",
            summary.score,
            summary.correct_count,
            summary.total_items,
        )
        self._notify()

    def _cancel_pending(self) -> None:
        self._timer.cancel()
        if self._advance_call is not None:
            self._advance_call.cancel()
            self._advance_call = None

    # --- Helpers ---

    def _require_round(self) -> bool:
        return self._state is SessionState.IN_ROUND and self._builder is not None

    def _reject(self, message: str) -> bool:
        self._set_feedback(message)
        return False

    def _set_feedback(self, message: str) -> None:
        self._feedback = message
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
