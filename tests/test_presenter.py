import unittest

from devtrivia.app import presenter
from devtrivia.storage.schema import CodeReview, Question


class PresenterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.plain = presenter.make_palette(False)
        self.q = Question(
            id="q1",
            question="Which queue handles refunds?",
            answer="refunds-high",
            system="Payments",
            source_pr="#12",
            source_file="queues.py",
        )
        self.cr = CodeReview(
            id="cr1",
            code_snippet="def f(x):\n    return eval(x)",
            answer="eval on user input",
            category="security",
            reviewer="dana",
            source_pr="#13",
            source_file="calc.py",
        )

    def test_question_layout(self) -> None:
        text = presenter.format_item(self.q, self.plain)
        self.assertIn(" TRIVIA  Payments", text)
        self.assertIn("Source: #12 → queues.py", text)
        self.assertIn("Which queue handles refunds?", text)
        self.assertNotIn("refunds-high", text)

    def test_code_review_box(self) -> None:
        lines = presenter.format_item(self.cr, self.plain).split("\n")
        self.assertIn(" CODE REVIEW  security", lines[0])
        self.assertIn("From: dana on #13", lines)
        self.assertIn("File: calc.py", lines)
        top = lines.index("┌" + "─" * presenter.BOX_WIDTH + "┐")
        self.assertEqual(lines[top + 1], "│ def f(x):")
        self.assertEqual(lines[top + 2], "│     return eval(x)")
        self.assertEqual(lines[top + 3], "└" + "─" * presenter.BOX_WIDTH + "┘")

    def test_answer_and_feedback(self) -> None:
        self.assertIn("refunds-high", presenter.format_answer(self.q, self.plain))
        self.assertIn("Streak: 4", presenter.format_correct(4, self.plain))
        self.assertNotEqual(presenter.format_correct(1, self.plain), presenter.format_incorrect(self.plain))

    def test_color_palette_wraps_badges(self) -> None:
        colored = presenter.format_item(self.q, presenter.make_palette(True))
        self.assertIn("\x1b[44m", colored)
        self.assertIn("\x1b[0m", colored)

    def test_usage_lists_commands(self) -> None:
        text = presenter.usage(self.plain)
        for word in ("stats", "code", "biz", "Reveal answer", "Quit"):
            self.assertIn(word, text)


if __name__ == "__main__":
    unittest.main()
