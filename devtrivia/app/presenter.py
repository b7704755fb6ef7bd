from __future__ import annotations

"""Terminal formatting for quiz items, answers, and round feedback.

Every function returns text; printing is left to the caller's UI callbacks.
"""

from typing import Dict

from ..storage.schema import CodeReview, Item, Question

ANSI = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "red": "\x1b[31m",
    "bg_blue": "\x1b[44m",
    "bg_magenta": "\x1b[45m",
}

CLEAR_SCREEN = "\x1b[2J\x1b[H"
BOX_WIDTH = 49

NO_QUESTIONS = "No questions found. Run /end-day to generate some!"


def make_palette(color: bool = True) -> Dict[str, str]:
    """ANSI codes by name, or empty strings when color is off."""
    if color:
        return dict(ANSI)
    return {k: "" for k in ANSI}


def _format_question(q: Question, p: Dict[str, str]) -> str:
    return "\n".join(
        [
            f"{p['bg_blue']}{p['bold']} TRIVIA {p['reset']} {p['dim']}{q.system}{p['reset']}",
            "",
            f"{p['dim']}Source: {q.source_pr} → {q.source_file}{p['reset']}",
            "",
            f"{p['yellow']}{q.question}{p['reset']}",
            "",
        ]
    )


def _format_code_review(cr: CodeReview, p: Dict[str, str]) -> str:
    lines = [
        f"{p['bg_magenta']}{p['bold']} CODE REVIEW {p['reset']} {p['dim']}{cr.category}{p['reset']}",
        "",
        f"{p['dim']}From: {cr.reviewer} on {cr.source_pr}{p['reset']}",
        f"{p['dim']}File: {cr.source_file}{p['reset']}",
        "",
        f"{p['yellow']}What's wrong with this code?{p['reset']}",
        "",
        f"{p['cyan']}┌{'─' * BOX_WIDTH}┐{p['reset']}",
    ]
    for line in cr.code_snippet.split("\n"):
        lines.append(f"{p['cyan']}│{p['reset']} {line}")
    lines.append(f"{p['cyan']}└{'─' * BOX_WIDTH}┘{p['reset']}")
    lines.append("")
    return "\n".join(lines)


def format_item(item: Item, p: Dict[str, str]) -> str:
    """Render the prompt side of an item (before the answer is revealed)."""
    if item.kind == "question":
        return _format_question(item, p)
    elif item.kind == "code_review":
        return _format_code_review(item, p)
    raise TypeError(f"Unknown item kind: {item.kind!r}")


def format_answer(item: Item, p: Dict[str, str]) -> str:
    return f"\n{p['green']}{p['bold']}Answer:{p['reset']}\n{item.answer}\n"


def format_correct(streak: int, p: Dict[str, str]) -> str:
    return f"\n{p['green']}✓ Nice!{p['reset']} Streak: {streak}"


def format_incorrect(p: Dict[str, str]) -> str:
    return f"\n{p['yellow']}○ You'll get it next time{p['reset']}"


def reveal_prompt(p: Dict[str, str]) -> str:
    return f"{p['dim']}[Press Enter to reveal]{p['reset']}"


def grade_prompt(p: Dict[str, str]) -> str:
    return (
        f"Did you get it? {p['green']}(y){p['reset']}/{p['red']}(n){p['reset']}"
        f"/{p['dim']}(q)uit{p['reset']}: "
    )


def next_prompt(p: Dict[str, str]) -> str:
    return f"{p['dim']}[Enter for next, q to quit]{p['reset']} "


def format_session_summary(current_streak: int, best_streak: int, p: Dict[str, str]) -> str:
    return (
        f"\n{p['bold']}Session complete!{p['reset']} "
        f"Streak: {current_streak} | Best: {best_streak}\n"
    )


def usage(p: Dict[str, str], prog: str = "trivia") -> str:
    return f"""
{p['bold']}Trivia Quiz{p['reset']}

Usage:
  {prog}              Random question (all types)
  {prog} stats        Show your stats
  {prog} code         Code review questions only
  {prog} biz [sys]    Business logic questions only, optionally by system
  {prog} <filter>     Filter by system or review category (e.g., {prog} payments)

Options:
  --config PATH     YAML config file (default: $TRIVIA_CONFIG)
  --explain         Trace quiz milestones to stderr

During quiz:
  Enter     Reveal answer
  y         Got it right
  n         Got it wrong
  q         Quit
"""
