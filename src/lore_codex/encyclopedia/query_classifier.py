"""
Pattern-based classification of raw user input.

Decides whether input is a natural-language question (routed to the answer
provider) or a keyword search (routed to the category listings):

    classifier = QueryClassifier()
    classifier.classify("Who is Aldric?")   # QueryKind.QUESTION
    classifier.classify("Aldric")           # QueryKind.SEARCH
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Iterable, List, Tuple


class QueryKind(str, Enum):
    QUESTION = "question"
    SEARCH = "search"


# Lead words are prefix matches: "whoever" also counts as starting with "who".
LEAD_WORDS: Dict[str, Tuple[str, ...]] = {
    "en": ("who", "what", "how", "why", "where", "when", "which", "tell", "speak", "say"),
    "fr": (
        "qui",
        "que",
        "quoi",
        "comment",
        "pourquoi",
        "où",
        "quand",
        "quel",
        "quelle",
        "quels",
        "quelles",
        "raconte",
        "parle",
        "dis",
    ),
}

_TRAILING_QUESTION_MARK = re.compile(r"\?\Z")


class QueryClassifier:
    """Classify user input as a question or a search term."""

    def __init__(self, languages: Iterable[str] = ("en",)):
        """Initialize classifier.

        Args:
            languages: Language codes whose lead words count as question openers

        Raises:
            ValueError: If a language has no lead word set
        """
        self.languages = tuple(languages)

        unknown = [lang for lang in self.languages if lang not in LEAD_WORDS]
        if unknown:
            raise ValueError(
                f"Unsupported question language(s): {', '.join(unknown)}. "
                f"Available: {', '.join(LEAD_WORDS)}"
            )

        patterns: List[re.Pattern[str]] = []
        seen = set()
        for lang in self.languages:
            for word in LEAD_WORDS[lang]:
                if word in seen:
                    continue
                seen.add(word)
                patterns.append(re.compile(rf"^{re.escape(word)}", re.IGNORECASE))
        patterns.append(_TRAILING_QUESTION_MARK)

        self.patterns: Tuple[re.Pattern[str], ...] = tuple(patterns)

    def classify(self, query: str) -> QueryKind:
        """Classify a query.

        Args:
            query: Raw user input, as typed

        Returns:
            QueryKind.QUESTION if any pattern matches, otherwise QueryKind.SEARCH
        """
        if any(pattern.search(query) for pattern in self.patterns):
            return QueryKind.QUESTION
        return QueryKind.SEARCH

    def is_question(self, query: str) -> bool:
        return self.classify(query) is QueryKind.QUESTION
