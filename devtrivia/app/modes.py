from __future__ import annotations

"""Quiz modes: command-token resolution and pool construction."""

from dataclasses import dataclass
from typing import List, Literal, Optional

from ..storage.schema import Item, QuizData

Mode = Literal["all", "questions", "code_reviews", "stats", "help"]

_COMMANDS = {
    "stats": "stats",
    "s": "stats",
    "code": "code_reviews",
    "c": "code_reviews",
    "cr": "code_reviews",
    "biz": "questions",
    "b": "questions",
    "q": "questions",
    "help": "help",
}


@dataclass(frozen=True)
class Invocation:
    mode: Mode
    filter: Optional[str] = None


def resolve_command(command: Optional[str], extra: Optional[str] = None) -> Invocation:
    """Map the positional CLI tokens to a mode and optional filter.

    Only the questions mode takes the second token as its filter. Any token
    that is not a known command becomes a filter over the combined pool.
    """
    if not command:
        return Invocation("all")
    token = command.strip().lower()
    mode = _COMMANDS.get(token)
    if mode is None:
        return Invocation("all", token)
    if mode == "questions":
        return Invocation("questions", extra or None)
    return Invocation(mode)  # type: ignore[arg-type]


def _matches(value: str, needle: Optional[str]) -> bool:
    if not needle:
        return True
    return needle.lower() in value.lower()


def build_pool(data: QuizData, mode: Mode, needle: Optional[str] = None) -> List[Item]:
    """Collect the items eligible for this run, in file order.

    Questions are filtered on ``system``, code reviews on ``category``. The
    returned list holds the data's own objects.
    """
    pool: List[Item] = []
    if mode in ("all", "questions"):
        pool.extend(q for q in data.questions if _matches(q.system, needle))
    if mode in ("all", "code_reviews"):
        pool.extend(cr for cr in data.all_code_reviews() if _matches(cr.category, needle))
    return pool
