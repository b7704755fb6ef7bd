from __future__ import annotations

"""Session Manager: orchestrates pick, present, reveal, grade, persist.

The manager is front-end agnostic: all terminal I/O goes through the ``ui``
callback mapping passed to ``run``:

- ``ask(prompt) -> str | None``: read one line; None means end of input.
- ``inform(msg)``: print a block of text.
- ``clear()`` (optional): clear the screen before each item.
"""

import random
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from ..policy.selector import pick
from ..storage.schema import Item, QuizData, Stats
from ..storage.store import TriviaStore
from . import presenter
from .explain import trace as xtrace
from .modes import Mode, build_pool

CORRECT_TOKENS = {"y", "yes"}
QUIT_TOKENS = {"q", "quit"}


def utc_today() -> str:
    return datetime.now(timezone.utc).date().isoformat()


@dataclass(frozen=True)
class SessionContext:
    started_at: datetime
    mode: Mode
    filter: Optional[str]
    pool_size: int


@dataclass
class RuntimeState:
    graded: int = 0
    correct: int = 0
    ended_at: Optional[datetime] = None


class SessionManager:
    def __init__(
        self,
        store: TriviaStore,
        data: QuizData,
        palette: Optional[Dict[str, str]] = None,
        *,
        rng: Any = random,
        today: Callable[[], str] = utc_today,
    ) -> None:
        self.store = store
        self.data = data
        self.palette = palette if palette is not None else presenter.make_palette(False)
        self.rng = rng
        self.today = today
        self.ctx: Optional[SessionContext] = None
        self.state = RuntimeState()
        self.pool: List[Item] = []

    def start_session(self, mode: Mode, needle: Optional[str] = None) -> int:
        """Build the working pool once for this run; returns its size."""
        self.pool = build_pool(self.data, mode, needle)
        self.state = RuntimeState()
        self.ctx = SessionContext(
            started_at=datetime.now(timezone.utc),
            mode=mode,
            filter=needle,
            pool_size=len(self.pool),
        )
        xtrace("pool_built", {"mode": mode, "filter": needle, "size": len(self.pool)})
        return len(self.pool)

    def grade(self, item: Item, correct: bool) -> Stats:
        """Apply one graded round to the item and streak, then persist."""
        item.record(correct)
        stats = self.data.ensure_stats()
        stats.record(correct, self.today())
        self.state.graded += 1
        if correct:
            self.state.correct += 1
        xtrace(
            "round_graded",
            {
                "id": item.id,
                "correct": correct,
                "times_asked": item.times_asked,
                "times_correct": item.times_correct,
                "streak": stats.current_streak,
            },
        )
        self.store.save(self.data)
        xtrace("data_saved", {"path": str(self.store.path)})
        return stats

    def run(self, ui: Dict[str, Callable[..., Any]]) -> Dict[str, Any]:
        if self.ctx is None:
            raise RuntimeError("start_session() must be called before run()")
        inform = ui["inform"]
        if not self.pool:
            inform(presenter.NO_QUESTIONS)
            return self._summary(started=False)

        while self._play_round(ui):
            pass

        self.state.ended_at = datetime.now(timezone.utc)
        summary = self._summary(started=True)
        inform(
            presenter.format_session_summary(
                summary["current_streak"], summary["best_streak"], self.palette
            )
        )
        xtrace("session_ended", summary)
        return summary

    def _read(self, ui: Dict[str, Callable[..., Any]], prompt: str) -> Optional[str]:
        raw = ui["ask"](prompt)
        if raw is None:
            return None
        return str(raw).strip().lower()

    def _play_round(self, ui: Dict[str, Callable[..., Any]]) -> bool:
        """Run one Presenting -> Revealed -> Graded cycle.

        Returns False once the operator quits or input ends.
        """
        p = self.palette
        clear = ui.get("clear", lambda *_a, **_k: None)
        clear()

        item = pick(self.pool, self.rng)
        xtrace("item_picked", {"id": item.id, "kind": item.kind})
        ui["inform"](presenter.format_item(item, p))

        # Presenting: any input reveals.
        if self._read(ui, presenter.reveal_prompt(p)) is None:
            return False

        # Revealed
        ui["inform"](presenter.format_answer(item, p))
        result = self._read(ui, presenter.grade_prompt(p))
        if result is None or result in QUIT_TOKENS:
            return False

        # Graded; anything but y/yes counts as a miss.
        correct = result in CORRECT_TOKENS
        stats = self.grade(item, correct)
        if correct:
            ui["inform"](presenter.format_correct(stats.current_streak, p))
        else:
            ui["inform"](presenter.format_incorrect(p))

        nxt = self._read(ui, presenter.next_prompt(p))
        if nxt is None or nxt in QUIT_TOKENS:
            return False
        return True

    def _summary(self, *, started: bool) -> Dict[str, Any]:
        stats = self.data.stats or Stats()
        ctx = self.ctx
        ended_at = self.state.ended_at
        return {
            "started": started,
            "mode": ctx.mode if ctx else None,
            "filter": ctx.filter if ctx else None,
            "pool_size": ctx.pool_size if ctx else 0,
            "started_at": ctx.started_at.isoformat() if ctx else None,
            "ended_at": ended_at.isoformat() if ended_at else None,
            "graded": self.state.graded,
            "correct": self.state.correct,
            "current_streak": stats.current_streak,
            "best_streak": stats.best_streak,
        }
