from __future__ import annotations

"""Aggregate accuracy and streak report over the whole data file."""

from dataclasses import dataclass
from typing import Dict, List, Optional

import pandas as pd

from ..app.presenter import make_palette
from ..storage.schema import QuizData, Stats

COLUMNS = ["kind", "id", "system", "times_asked", "times_correct"]


def accuracy_percent(correct: int, attempts: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when nothing was asked."""
    if attempts <= 0:
        return 0
    return (200 * correct + attempts) // (2 * attempts)


@dataclass(frozen=True)
class KindSummary:
    total: int
    attempted: int
    correct: int
    attempts: int

    @property
    def accuracy(self) -> int:
        return accuracy_percent(self.correct, self.attempts)


def items_frame(data: QuizData) -> pd.DataFrame:
    """One row per item with its kind, system, and counters."""
    rows = [
        {
            "kind": q.kind,
            "id": q.id,
            "system": q.system,
            "times_asked": q.times_asked,
            "times_correct": q.times_correct,
        }
        for q in data.questions
    ]
    rows += [
        {
            "kind": cr.kind,
            "id": cr.id,
            "system": None,
            "times_asked": cr.times_asked,
            "times_correct": cr.times_correct,
        }
        for cr in data.all_code_reviews()
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize_kind(df: pd.DataFrame, kind: str) -> KindSummary:
    sub = df[df["kind"] == kind]
    return KindSummary(
        total=int(len(sub)),
        attempted=int((sub["times_asked"] > 0).sum()),
        correct=int(sub["times_correct"].sum()),
        attempts=int(sub["times_asked"].sum()),
    )


def distinct_systems(df: pd.DataFrame) -> List[str]:
    """Question systems in first-seen order, blanks included."""
    systems = df.loc[df["kind"] == "question", "system"].dropna()
    return systems.drop_duplicates().tolist()


def collect(data: QuizData) -> Dict[str, object]:
    df = items_frame(data)
    stats = data.stats or Stats()
    return {
        "questions": summarize_kind(df, "question"),
        "code_reviews": summarize_kind(df, "code_review"),
        "current_streak": stats.current_streak,
        "best_streak": stats.best_streak,
        "last_played": stats.last_played,
        "systems": distinct_systems(df),
    }


def _kind_line(s: KindSummary) -> str:
    return f"  Total: {s.total} | Attempted: {s.attempted} | Accuracy: {s.accuracy}%"


def report(data: QuizData, p: Optional[Dict[str, str]] = None) -> str:
    """Human-readable stats block. Never touches the data."""
    if p is None:
        p = make_palette(False)
    c = collect(data)
    qs: KindSummary = c["questions"]  # type: ignore[assignment]
    crs: KindSummary = c["code_reviews"]  # type: ignore[assignment]

    lines = [
        "",
        f"{p['bold']}📊 Trivia Stats{p['reset']}",
        "",
        f"{p['cyan']}Business Logic Questions:{p['reset']}",
        _kind_line(qs),
    ]
    if crs.total > 0:
        lines += ["", f"{p['magenta']}Code Review Questions:{p['reset']}", _kind_line(crs)]

    lines += [
        "",
        f"{p['yellow']}🔥 Streak: {c['current_streak']} | Best: {c['best_streak']}{p['reset']}",
    ]
    if c["last_played"]:
        lines.append(f"{p['dim']}Last played: {c['last_played']}{p['reset']}")
    lines.append("")

    systems: List[str] = c["systems"]  # type: ignore[assignment]
    if systems:
        lines.append(f"{p['dim']}Systems: {', '.join(systems)}{p['reset']}")
        lines.append("")
    return "\n".join(lines)
