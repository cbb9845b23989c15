"""Unit tests for question / search classification."""

from __future__ import annotations

import unittest
from pathlib import Path
import sys


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class TestQueryClassifier(unittest.TestCase):
    """Tests for `QueryClassifier.classify`."""

    def setUp(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryClassifier

        self.classifier = QueryClassifier()

    def test_trailing_question_mark_is_question(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        for query in ["Aldric?", "the red tower?", "?", "12 + 3?"]:
            with self.subTest(query=query):
                self.assertIs(self.classifier.classify(query), QueryKind.QUESTION)

    def test_lead_words_are_questions(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        queries = [
            "who is Aldric",
            "WHAT happened at the red tower",
            "How does fireball work",
            "why did the gods leave",
            "Where is Valmont",
            "when was the war",
            "which deity rules the sea",
            "tell me about Aldric",
            "Speak of the old kings",
            "say something about Morwen",
        ]
        for query in queries:
            with self.subTest(query=query):
                self.assertIs(self.classifier.classify(query), QueryKind.QUESTION)

    def test_plain_terms_are_search(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        for query in ["Aldric", "red tower", "fireball", "the god of war", "qui"]:
            with self.subTest(query=query):
                self.assertIs(self.classifier.classify(query), QueryKind.SEARCH)

    def test_lead_word_must_open_the_input(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        self.assertIs(self.classifier.classify("Aldric who"), QueryKind.SEARCH)
        self.assertIs(self.classifier.classify(" who is Aldric"), QueryKind.SEARCH)

    def test_lead_word_is_a_prefix_match(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        self.assertIs(self.classifier.classify("whole grain"), QueryKind.QUESTION)

    def test_question_mark_must_be_last(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        self.assertIs(self.classifier.classify("Aldric? no"), QueryKind.SEARCH)

    def test_question_mark_before_trailing_newline_is_search(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryKind

        self.assertIs(self.classifier.classify("Aldric?\n"), QueryKind.SEARCH)

    def test_french_lead_words(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryClassifier, QueryKind

        classifier = QueryClassifier(languages=["fr"])

        for query in ["Qui est Aldric", "où se trouve Valmont", "Raconte la guerre"]:
            with self.subTest(query=query):
                self.assertIs(classifier.classify(query), QueryKind.QUESTION)
        self.assertIs(classifier.classify("who is Aldric"), QueryKind.SEARCH)

    def test_languages_combine(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryClassifier

        classifier = QueryClassifier(languages=["en", "fr"])

        self.assertTrue(classifier.is_question("who is Aldric"))
        self.assertTrue(classifier.is_question("qui est Aldric"))
        self.assertFalse(classifier.is_question("Aldric"))

    def test_unknown_language_is_rejected(self) -> None:
        from lore_codex.encyclopedia.query_classifier import QueryClassifier

        with self.assertRaises(ValueError):
            QueryClassifier(languages=["de"])

    def test_classification_is_deterministic(self) -> None:
        results = {self.classifier.classify("where is Valmont") for _ in range(5)}

        self.assertEqual(len(results), 1)


if __name__ == "__main__":
    unittest.main()
