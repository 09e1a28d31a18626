"""Tests for streak scoring and round history."""

from whiz_app.core.services.scoreboard import Scoreboard


def test_three_correct_answers_score_four_points():
    """Points equal the streak before the round, minimum one: 1 + 1 + 2."""
    board = Scoreboard()
    points = [board.record_answer(5, 5).points_awarded for _ in range(3)]
    assert points == [1, 1, 2]
    assert board.score == 4
    assert board.streak == 3


def test_streak_keeps_growing():
    board = Scoreboard()
    for _ in range(4):
        board.record_answer(1, 1)
    assert board.get_history()[-1].points_awarded == 3
    assert board.score == 7


def test_wrong_answer_resets_streak_and_scores_nothing():
    board = Scoreboard()
    board.record_answer(2, 2)
    board.record_answer(2, 2)
    result = board.record_answer(3, 2)
    assert not result.was_correct
    assert result.points_awarded == 0
    assert board.streak == 0
    assert board.score == 2

    assert board.record_answer(9, 9).points_awarded == 1


def test_timeout_records_zero_and_resets_streak():
    board = Scoreboard()
    board.record_answer(4, 4)
    result = board.record_timeout(12)
    assert result.user_answer == 0
    assert result.was_timed_out
    assert not result.was_correct
    assert board.streak == 0


def test_timeout_is_wrong_even_when_answer_is_zero():
    board = Scoreboard()
    assert not board.record_timeout(0).was_correct


def test_summary_and_clear():
    board = Scoreboard()
    board.record_answer(1, 1)
    board.record_answer(2, 3)
    board.record_timeout(4)
    summary = board.build_summary(total_items=3)
    assert summary.score == 1
    assert summary.correct_count == 1
    assert summary.correctness == [True, False, False]
    assert not summary.passed

    board.clear()
    assert board.score == 0
    assert board.streak == 0
    assert board.get_history() == []
