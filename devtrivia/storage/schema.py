from __future__ import annotations

"""Pydantic models for the trivia data file.

Items come in two variants distinguished by ``kind``. The discriminant is
derived from the list an item is stored in and is never written back.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Constants ---

REVIEW_CATEGORIES = ("database", "performance", "security", "style", "logic")


# --- Pydantic models ---

class _ItemBase(BaseModel):
    """Counter helpers shared by both variants.

    Fields are declared on each variant in file order so a save keeps the
    generator's key layout.
    """

    # Keep unknown keys so a save never drops fields written by the generator.
    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def _correct_within_asked(self):
        if self.times_correct > self.times_asked:
            raise ValueError(
                f"times_correct ({self.times_correct}) cannot exceed times_asked ({self.times_asked})"
            )
        return self

    def record(self, correct: bool) -> None:
        """Count one graded round against this item."""
        self.times_asked += 1
        if correct:
            self.times_correct += 1


class Question(_ItemBase):
    id: str
    question: str
    answer: str
    system: str = ""
    source_pr: str = ""
    source_file: str = ""
    added_date: str = ""
    times_asked: int = Field(0, ge=0)
    times_correct: int = Field(0, ge=0)
    kind: Literal["question"] = Field("question", exclude=True)


class CodeReview(_ItemBase):
    id: str
    code_snippet: str
    answer: str
    category: Literal[REVIEW_CATEGORIES]  # type: ignore[valid-type]
    reviewer: str = ""
    source_pr: str = ""
    source_file: str = ""
    added_date: str = ""
    times_asked: int = Field(0, ge=0)
    times_correct: int = Field(0, ge=0)
    kind: Literal["code_review"] = Field("code_review", exclude=True)


Item = Union[Question, CodeReview]


class Stats(BaseModel):
    model_config = ConfigDict(extra="allow")

    current_streak: int = Field(0, ge=0)
    best_streak: int = Field(0, ge=0)
    last_played: Optional[str] = None

    def record(self, correct: bool, today: str) -> None:
        """Advance or reset the streak for one graded round."""
        if correct:
            self.current_streak += 1
            if self.current_streak > self.best_streak:
                self.best_streak = self.current_streak
        else:
            self.current_streak = 0
        self.last_played = today


class QuizData(BaseModel):
    model_config = ConfigDict(extra="allow")

    questions: List[Question] = Field(default_factory=list)
    code_reviews: Optional[List[CodeReview]] = None
    stats: Optional[Stats] = None

    def all_code_reviews(self) -> List[CodeReview]:
        return self.code_reviews if self.code_reviews is not None else []

    def ensure_stats(self) -> Stats:
        """Return the stats block, attaching a fresh one if the file had none."""
        if self.stats is None:
            self.stats = Stats()
        return self.stats

    def to_document(self) -> dict:
        """Plain dict in file layout; absent optional sections stay absent."""
        doc = self.model_dump(mode="json")
        for key in ("code_reviews", "stats"):
            if doc.get(key) is None:
                doc.pop(key, None)
        return doc
