from __future__ import annotations

"""JSON-backed store for the trivia data file.

The file is produced by an external generator step; this module never creates
it. Every save rewrites the whole document with 2-space indentation so the
file stays diff-friendly.
"""

import json
from pathlib import Path

from .schema import QuizData


class TriviaFileMissing(FileNotFoundError):
    """Raised when the data file has not been generated yet."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"No trivia file found at {path}")
        self.path = path


class TriviaStore:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> QuizData:
        """Read and validate the data file.

        Raises TriviaFileMissing when the file is absent. JSON and schema
        errors are left to propagate.
        """
        if not self.path.exists():
            raise TriviaFileMissing(self.path)
        with self.path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        return QuizData.model_validate(raw)

    def save(self, data: QuizData) -> None:
        """Overwrite the data file with the full document."""
        text = json.dumps(data.to_document(), indent=2, ensure_ascii=False)
        with self.path.open("w", encoding="utf-8") as f:
            f.write(text)
