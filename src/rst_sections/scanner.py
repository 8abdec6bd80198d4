"""Collect headings from a line buffer."""

from __future__ import annotations

from rst_sections.decoration import SECTION_CHARS, is_title_text, is_underline
from rst_sections.locator import locate_heading
from rst_sections.types import HeadingLocation, Lines, SectionRecord


def _record(buffer: Lines, found: HeadingLocation) -> SectionRecord:
    return SectionRecord(
        title_index=found.title_index,
        char=buffer[found.underline_index][0],
        has_overline=found.has_overline,
    )


def find_last_section(
    buffer: Lines, index: int, *, section_chars: str = SECTION_CHARS,
) -> SectionRecord | None:
    """Return the nearest heading at or before line ``index``, or None.

    Scans backward from ``index``; a heading counts as soon as any of its
    lines (overline, title, underline) is reached.
    """
    if not buffer:
        return None
    if not 0 <= index < len(buffer):
        raise IndexError(f"line index {index} out of range for {len(buffer)} lines")
    for candidate in range(index, -1, -1):
        found = locate_heading(buffer, candidate, section_chars=section_chars)
        if found is not None:
            return _record(buffer, found)
    return None


def last_section(
    buffer: Lines, index: int, *, section_chars: str = SECTION_CHARS,
) -> tuple[int | None, str | None, bool | None]:
    """Triple view of ``find_last_section``; ``(None, None, None)`` if none."""
    found = find_last_section(buffer, index, section_chars=section_chars)
    if found is None:
        return (None, None, None)
    return found.as_triple()


def all_sections(
    buffer: Lines, *, section_chars: str = SECTION_CHARS,
) -> tuple[SectionRecord, ...]:
    """Return every heading in ascending title-index order.

    Only title text directly followed by a rule is tried as a title, so a
    heading is never reported a second time from its underline.
    """
    sections: list[SectionRecord] = []
    for idx in range(len(buffer) - 1):
        if not is_title_text(buffer[idx], section_chars):
            continue
        if not is_underline(buffer[idx + 1], section_chars):
            continue
        found = locate_heading(buffer, idx, section_chars=section_chars)
        if found is not None:
            sections.append(_record(buffer, found))
    return tuple(sections)
