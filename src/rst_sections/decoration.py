"""Rule-line classification and construction."""

from __future__ import annotations

import string

# Legal heading decoration characters: 7-bit ASCII punctuation.
SECTION_CHARS = string.punctuation


def is_underline(line: str, section_chars: str = SECTION_CHARS) -> bool:
    """Return True if ``line`` is a run of one legal decoration character."""
    if not line:
        return False
    first = line[0]
    if first not in section_chars:
        return False
    return line.count(first) == len(line)


def is_title_text(line: str, section_chars: str = SECTION_CHARS) -> bool:
    """Return True for a line that could carry heading text."""
    return bool(line.strip()) and not is_underline(line, section_chars)


def make_rule(char: str, width: int, section_chars: str = SECTION_CHARS) -> str:
    """Build a rule line of ``width`` copies of ``char`` (at least one)."""
    if len(char) != 1 or char not in section_chars:
        raise ValueError(f"Not a decoration character: {char!r}")
    return char * max(width, 1)


def rule_width(title: str) -> int:
    """Width a rule must have to span ``title``, leading indent included."""
    return len(title.rstrip())
