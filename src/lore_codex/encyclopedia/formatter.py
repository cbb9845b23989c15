"""Paragraph normalization for item content."""

from __future__ import annotations

from typing import Iterator


class FormattedContent:
    """
    Paragraphs of a piece of content, derived on iteration.

    Paragraphs are separated by a blank line (``"\\n\\n"``). Inside a
    paragraph each line is trimmed and the lines are rejoined with
    ``line_break``. Iterating again starts over from the stored text.
    """

    def __init__(self, content: str, line_break: str = "\n"):
        self.content = content
        self.line_break = line_break

    def __iter__(self) -> Iterator[str]:
        for paragraph in self.content.split("\n\n"):
            lines = [line.strip() for line in paragraph.split("\n")]
            yield self.line_break.join(lines)

    def __repr__(self) -> str:
        return f"FormattedContent({self.content[:40]!r}..., line_break={self.line_break!r})"


def format_content(content: str, line_break: str = "\n") -> FormattedContent:
    """
    Split content into display-ready paragraph units.

    Args:
        content: Raw multi-line text
        line_break: Soft line break placed between lines of a paragraph

    Returns:
        A restartable iterable of paragraph strings
    """
    return FormattedContent(content, line_break=line_break)
