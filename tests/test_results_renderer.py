"""Tests for the end-of-game results page."""

from whiz_app.core.models import RoundResult, SessionSummary
from whiz_app.core.results_renderer import (
    FAIL_COLOR,
    PASS_COLOR,
    ResultsRenderer,
    describe_round,
    summary_to_markdown,
)


def _summary():
    return SessionSummary(
        score=3,
        total_items=3,
        history=(
            RoundResult(user_answer=10, correct_answer=10, was_correct=True, points_awarded=1),
            RoundResult(user_answer=12, correct_answer=21, was_correct=False),
            RoundResult(user_answer=0, correct_answer=5, was_correct=False, was_timed_out=True),
        ),
    )


def test_describe_round_statuses():
    correct, wrong, timed_out = _summary().history
    assert describe_round(correct) == ("10", "Correct")
    assert describe_round(wrong) == ("12", "Incorrect (Ans: 21)")
    assert describe_round(timed_out) == ("-", "Timed Out (Ans: 5)")


def test_markdown_lists_every_round():
    markdown = summary_to_markdown(_summary())
    assert "**Total Points: 3**" in markdown
    assert "**1 / 3**" in markdown
    assert "| 1 | 10 | Correct |" in markdown
    assert "| 3 | - | Timed Out (Ans: 5) |" in markdown


def test_html_document_uses_fail_color_below_half():
    html = ResultsRenderer().render_summary(_summary())
    assert html.startswith("<!doctype html>")
    assert "<table>" in html
    assert "Incorrect (Ans: 21)" in html
    assert f"border: 4px solid {FAIL_COLOR}" in html


def test_html_document_uses_pass_color_at_half():
    summary = SessionSummary(
        score=1,
        total_items=2,
        history=(
            RoundResult(user_answer=1, correct_answer=1, was_correct=True, points_awarded=1),
            RoundResult(user_answer=0, correct_answer=3, was_correct=False, was_timed_out=True),
        ),
    )
    assert summary.passed
    assert f"border: 4px solid {PASS_COLOR}" in ResultsRenderer().render_summary(summary)


def test_empty_fragment_placeholder():
    assert "No results yet" in ResultsRenderer().render_fragment("   ")
