import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from devtrivia.storage.store import TriviaStore

SAMPLE_DOC: Dict[str, Any] = {
    "questions": [
        {
            "id": "q-payments-retry",
            "question": "How many times does the payout job retry a failed transfer?",
            "answer": "Three times with exponential backoff, then it pages on-call.",
            "system": "Payments",
            "source_pr": "#412",
            "source_file": "jobs/payout.py",
            "added_date": "2026-09-30",
            "times_asked": 0,
            "times_correct": 0,
        },
        {
            "id": "q-auth-session",
            "question": "What invalidates an admin session early?",
            "answer": "A role change on the account.",
            "system": "Auth",
            "source_pr": "#398",
            "source_file": "auth/session.py",
            "added_date": "2026-09-28",
            "times_asked": 4,
            "times_correct": 2,
        },
    ],
    "code_reviews": [
        {
            "id": "cr-n-plus-one",
            "code_snippet": "for order in orders:\n    order.customer.name",
            "answer": "N+1 query; use select_related('customer').",
            "category": "database",
            "reviewer": "mkline",
            "source_pr": "#405",
            "source_file": "orders/views.py",
            "added_date": "2026-10-01",
            "times_asked": 1,
            "times_correct": 1,
        }
    ],
    "stats": {"current_streak": 0, "best_streak": 0, "last_played": None},
}


def sample_doc() -> Dict[str, Any]:
    return copy.deepcopy(SAMPLE_DOC)


def write_doc(directory: Path, doc: Dict[str, Any], name: str = "questions.json") -> Path:
    path = Path(directory) / name
    path.write_text(json.dumps(doc, indent=2), encoding="utf-8")
    return path


class RecordingStore(TriviaStore):
    """TriviaStore that counts saves."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.saves = 0

    def save(self, data) -> None:
        self.saves += 1
        super().save(data)


class ScriptedUI:
    """UI callbacks fed from a list of answers; None once the script runs out."""

    def __init__(self, answers: List[Optional[str]]) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.clears = 0

    def ask(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if not self.answers:
            return None
        return self.answers.pop(0)

    def inform(self, msg: str) -> None:
        self.output.append(msg)

    def clear(self) -> None:
        self.clears += 1

    def callbacks(self) -> Dict[str, Any]:
        return {"ask": self.ask, "inform": self.inform, "clear": self.clear}

    def text(self) -> str:
        return "\n".join(self.output)


class FixedRng:
    """Stand-in for the random module returning a fixed draw."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value
