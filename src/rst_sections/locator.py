"""Locate the heading around a line index.

A heading is a title line directly followed by a rule line (underline),
optionally directly preceded by a rule line of the same character
(overline).  Given the index of any of those lines, ``locate_heading``
returns the indices of all of them.

Rule length is never a matching criterion: a rule shorter than its title
still decorates it.  Lengths only matter when rules are written.

A rule that sits between two text lines and matches the rule under the
second one is read as that heading's overline, not as an underline of the
first text line.
"""

from __future__ import annotations

from rst_sections.decoration import SECTION_CHARS, is_title_text, is_underline
from rst_sections.types import HeadingLocation, Lines


def _line(buffer: Lines, index: int) -> str | None:
    if 0 <= index < len(buffer):
        return buffer[index]
    return None


def _is_rule(buffer: Lines, index: int, section_chars: str, char: str | None = None) -> bool:
    line = _line(buffer, index)
    if line is None or not is_underline(line, section_chars):
        return False
    return char is None or line[0] == char


def _opens_overlined_title(buffer: Lines, index: int, section_chars: str) -> bool:
    """True if ``index`` is a rule, then title text, then a matching rule."""
    if not _is_rule(buffer, index, section_chars):
        return False
    title = _line(buffer, index + 1)
    if title is None or not is_title_text(title, section_chars):
        return False
    return _is_rule(buffer, index + 2, section_chars, buffer[index][0])


def _heading_at_title(
    buffer: Lines, title_index: int, section_chars: str,
) -> HeadingLocation | None:
    title = _line(buffer, title_index)
    if title is None or not is_title_text(title, section_chars):
        return None
    if not _is_rule(buffer, title_index + 1, section_chars):
        return None
    if _opens_overlined_title(buffer, title_index + 1, section_chars):
        return None
    char = buffer[title_index + 1][0]
    overline = title_index - 1 if _is_rule(buffer, title_index - 1, section_chars, char) else None
    return HeadingLocation(
        title_index=title_index,
        underline_index=title_index + 1,
        overline_index=overline,
    )


def locate_heading(
    buffer: Lines, index: int, *, section_chars: str = SECTION_CHARS,
) -> HeadingLocation | None:
    """Find the heading whose title, underline or overline sits at ``index``.

    On a rule line, the overline reading (title text and a matching rule
    below) is tried before the underline reading (title text above).  On a
    text line, ``index`` must be the title.

    Returns None when ``index`` is not part of any heading.
    """
    if not 0 <= index < len(buffer):
        raise IndexError(f"line index {index} out of range for {len(buffer)} lines")

    if is_underline(buffer[index], section_chars):
        below = _heading_at_title(buffer, index + 1, section_chars)
        if below is not None and below.overline_index == index:
            return below
        return _heading_at_title(buffer, index - 1, section_chars)
    return _heading_at_title(buffer, index, section_chars)


def line_under_over(
    buffer: Lines, index: int, *, section_chars: str = SECTION_CHARS,
) -> tuple[int, int | None, int | None]:
    """Triple view of ``locate_heading``: ``(title, underline, overline)``.

    Returns ``(index, None, None)`` when ``index`` is not part of a heading.
    """
    found = locate_heading(buffer, index, section_chars=section_chars)
    if found is None:
        return (index, None, None)
    return found.as_triple()
