from .schema import REVIEW_CATEGORIES, Item, Question, CodeReview, Stats, QuizData
from .store import TriviaStore, TriviaFileMissing

__all__ = [
    "REVIEW_CATEGORIES",
    "Item",
    "Question",
    "CodeReview",
    "Stats",
    "QuizData",
    "TriviaStore",
    "TriviaFileMissing",
]
