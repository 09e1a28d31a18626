"""Markdown rendering of the end-of-game results page.

Architecture note:
    The summary is first written as Markdown and then converted with
    markdown-it. The Markdown form stays readable in logs and tests, while the
    Qt results panel shows the HTML document in a QWebEngineView.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

from whiz_app.core.models import RoundResult, SessionSummary

PASS_COLOR = "#2E7D32"
FAIL_COLOR = "#D32F2F"
TIMEOUT_COLOR = "#B28704"


def describe_round(result: RoundResult) -> tuple[str, str]:
    """Return ``(displayed answer, status)`` for one round of the summary."""
    if result.was_timed_out:
        return "-", f"Timed Out (Ans: {result.correct_answer})"
    if result.was_correct:
        return str(result.user_answer), "Correct"
    return str(result.user_answer), f"Incorrect (Ans: {result.correct_answer})"


def _round_color(result: RoundResult) -> str:
    if result.was_timed_out:
        return TIMEOUT_COLOR
    return PASS_COLOR if result.was_correct else FAIL_COLOR


def summary_to_markdown(summary: SessionSummary) -> str:
    """Build the Markdown body of the results page."""
    lines = [
        "## CHALLENGE COMPLETE!",
        "",
        f"**Total Points: {summary.score}**",
        "",
        f"Final Score: **{summary.correct_count} / {summary.total_items}**",
        "",
        "| Item | Your answer | Result |",
        "| ---: | :---: | :--- |",
    ]
    for idx, result in enumerate(summary.history, start=1):
        shown, status = describe_round(result)
        lines.append(f"| {idx} | {shown} | {status} |")
    return "\n".join(lines)


@dataclass(slots=True)
class ResultsRenderer:
    """Converts a finished game summary into an HTML document."""

    font_size: int = 14
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": False}).enable("table")

    def render_fragment(self, markdown_text: str) -> str:
        sanitized = markdown_text.strip()
        if not sanitized:
            return "<p><em>No results yet.</em></p>"
        return self._markdown.render(sanitized)

    def render_summary(self, summary: SessionSummary, title: str = "WhizQt") -> str:
        """Render ``summary`` as a full document with pass/fail colouring."""
        body = self.render_fragment(summary_to_markdown(summary))
        accent = PASS_COLOR if summary.passed else FAIL_COLOR
        row_styles = "\n".join(
            f"      tbody tr:nth-child({idx}) td:last-child {{ color: {_round_color(result)}; }}"
            for idx, result in enumerate(summary.history, start=1)
        )
        return f"""<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>{escape(title)}</title>
    <style>
      body {{ font-family: Verdana, 'Segoe UI', sans-serif; font-size: {self.font_size}pt; margin: 0; padding: 1rem; color: #141E28; }}
      h2 {{ text-align: center; }}
      p {{ text-align: center; }}
      p strong {{ color: {accent}; }}
      table {{ margin: auto; border: 4px solid {accent}; border-radius: 20px; background: #F7F7F7; padding: 0.5rem; }}
      td, th {{ padding: 0.2rem 0.8rem; }}
{row_styles}
    </style>
  </head>
  <body>
{body}
  </body>
</html>"""


renderer = ResultsRenderer()
# Shared instance; the Qt app renders from a single thread.
