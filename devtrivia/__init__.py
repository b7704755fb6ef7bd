"""Personal command-line trivia quiz over generated business-logic and code-review questions."""

__version__ = "0.1.0"

__all__ = ["__version__"]
