"""
Extraction of a single skill from the flat skills blob.

The skills resource is one text file where every entry starts with an
unindented ``Name: ...`` line, followed by indented continuation lines:

    Fireball: deals damage
      more info
    IceSpike: freezes

Entries are located by a case-insensitive substring match on the id, so an id
that is part of a longer entry name ("Fire" in "Fireball") matches that entry.
"""

from __future__ import annotations

from .models import ItemDetail


def _starts_new_entry(line: str) -> bool:
    """An unindented, non-blank line with a colon opens the next entry."""
    return ":" in line and bool(line.strip()) and not line.startswith((" ", "\t"))


def extract_skill(raw_text: str, target_id: str) -> ItemDetail:
    """
    Extract the entry for ``target_id`` from the skills blob.

    Args:
        raw_text: Full content of the skills resource
        target_id: Skill identifier to look for

    Returns:
        ItemDetail with the entry name and its content (start line included).
        Name and content are empty strings when nothing matches.
    """
    needle = target_id.lower()
    name = ""
    section: list[str] = []
    in_section = False

    for line in raw_text.split("\n"):
        if not in_section:
            if needle in line.lower() and ":" in line:
                in_section = True
                name = line.split(":", 1)[0].strip()
                section.append(line)
            continue

        if _starts_new_entry(line):
            break
        section.append(line)

    return ItemDetail(id=target_id, name=name, content="\n".join(section).strip())
