import unittest

from devtrivia.stats.stats import accuracy_percent, collect, items_frame, report, summarize_kind
from devtrivia.storage.schema import QuizData

from fixtures import sample_doc


def _question(qid, asked, correct, system="Payments"):
    return {
        "id": qid,
        "question": "?",
        "answer": "!",
        "system": system,
        "source_pr": "#1",
        "source_file": "a.py",
        "added_date": "2026-10-01",
        "times_asked": asked,
        "times_correct": correct,
    }


class AccuracyTests(unittest.TestCase):
    def test_three_item_pool(self) -> None:
        data = QuizData.model_validate(
            {"questions": [_question("a", 0, 0), _question("b", 4, 2), _question("c", 1, 1)]}
        )
        s = summarize_kind(items_frame(data), "question")
        self.assertEqual((s.total, s.attempted, s.correct, s.attempts), (3, 2, 3, 5))
        self.assertEqual(s.accuracy, 60)

    def test_no_attempts_is_zero(self) -> None:
        self.assertEqual(accuracy_percent(0, 0), 0)

    def test_halves_round_up(self) -> None:
        self.assertEqual(accuracy_percent(1, 8), 13)
        self.assertEqual(accuracy_percent(2, 3), 67)
        self.assertEqual(accuracy_percent(1, 3), 33)


class ReportTests(unittest.TestCase):
    def test_collect_splits_kinds(self) -> None:
        data = QuizData.model_validate(sample_doc())
        c = collect(data)
        self.assertEqual(c["questions"].total, 2)
        self.assertEqual(c["questions"].accuracy, 50)
        self.assertEqual(c["code_reviews"].total, 1)
        self.assertEqual(c["code_reviews"].accuracy, 100)
        self.assertEqual(c["systems"], ["Payments", "Auth"])

    def test_report_text(self) -> None:
        doc = sample_doc()
        doc["stats"] = {"current_streak": 3, "best_streak": 5, "last_played": "2026-10-18"}
        text = report(QuizData.model_validate(doc))
        self.assertIn("Business Logic Questions:", text)
        self.assertIn("Total: 2 | Attempted: 1 | Accuracy: 50%", text)
        self.assertIn("Code Review Questions:", text)
        self.assertIn("Total: 1 | Attempted: 1 | Accuracy: 100%", text)
        self.assertIn("Streak: 3 | Best: 5", text)
        self.assertIn("Last played: 2026-10-18", text)
        self.assertIn("Systems: Payments, Auth", text)
        self.assertNotIn("\x1b[", text)

    def test_systems_deduplicated(self) -> None:
        data = QuizData.model_validate(
            {"questions": [_question("a", 0, 0, "Billing"), _question("b", 0, 0, "Auth"), _question("c", 0, 0, "Billing")]}
        )
        self.assertIn("Systems: Billing, Auth\n", report(data))

    def test_blank_system_is_a_distinct_value(self) -> None:
        data = QuizData.model_validate(
            {"questions": [_question("a", 0, 0, "Billing"), _question("b", 0, 0, ""), _question("c", 0, 0, "")]}
        )
        self.assertEqual(collect(data)["systems"], ["Billing", ""])

    def test_review_section_hidden_without_reviews(self) -> None:
        doc = sample_doc()
        del doc["code_reviews"]
        del doc["stats"]
        text = report(QuizData.model_validate(doc))
        self.assertNotIn("Code Review", text)
        self.assertIn("Streak: 0 | Best: 0", text)
        self.assertNotIn("Last played", text)

    def test_empty_file(self) -> None:
        text = report(QuizData.model_validate({"questions": []}))
        self.assertIn("Total: 0 | Attempted: 0 | Accuracy: 0%", text)
        self.assertNotIn("Systems:", text)

    def test_report_is_read_only(self) -> None:
        data = QuizData.model_validate({k: v for k, v in sample_doc().items() if k != "stats"})
        before = data.to_document()
        report(data)
        self.assertEqual(data.to_document(), before)
        self.assertIsNone(data.stats)


if __name__ == "__main__":
    unittest.main()
