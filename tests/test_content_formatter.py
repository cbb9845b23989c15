"""Unit tests for paragraph formatting of item content."""

from __future__ import annotations

import unittest
from pathlib import Path
import sys


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class TestFormatContent(unittest.TestCase):
    """Tests for `format_content`."""

    def test_splits_paragraphs_and_soft_joins_lines(self) -> None:
        from lore_codex.encyclopedia.formatter import format_content

        paragraphs = list(format_content("Line one.\nLine two.\n\nSecond paragraph."))

        self.assertEqual(paragraphs, ["Line one.\nLine two.", "Second paragraph."])

    def test_lines_are_trimmed(self) -> None:
        from lore_codex.encyclopedia.formatter import format_content

        paragraphs = list(format_content("  indented  \n\ttabbed\t", line_break="<br>"))

        self.assertEqual(paragraphs, ["indented<br>tabbed"])

    def test_custom_line_break(self) -> None:
        from lore_codex.encyclopedia.formatter import format_content

        paragraphs = list(
            format_content("Line one.\nLine two.\n\nSecond paragraph.", line_break="<br>")
        )

        self.assertEqual(paragraphs[0], "Line one.<br>Line two.")
        self.assertEqual(paragraphs[1], "Second paragraph.")

    def test_iteration_can_restart(self) -> None:
        from lore_codex.encyclopedia.formatter import format_content

        formatted = format_content("a\n\nb\n\nc")

        self.assertEqual(list(formatted), ["a", "b", "c"])
        self.assertEqual(list(formatted), ["a", "b", "c"])

    def test_empty_content_yields_one_empty_paragraph(self) -> None:
        from lore_codex.encyclopedia.formatter import format_content

        self.assertEqual(list(format_content("")), [""])


if __name__ == "__main__":
    unittest.main()
