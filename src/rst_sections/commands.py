"""Interactive heading commands for editor integrations.

The pure operations work on a line buffer and a cursor line index and
return the title's new index (or None when there is nothing to act on).
The ``run_*`` wrappers drive them through an ``EditorAdapter``: they read
the buffer and cursor, write the edited lines back, move the cursor onto
the title and report errors to the user instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from rst_sections.canonical import CANONICAL_STYLES, to_standard_sections
from rst_sections.decoration import SECTION_CHARS, is_title_text
from rst_sections.errors import DepthExceeded, SectionsError
from rst_sections.levels import section_levels
from rst_sections.locator import locate_heading
from rst_sections.rewriter import change_section
from rst_sections.scanner import all_sections, find_last_section
from rst_sections.types import Buffer, SectionStyle

log = logging.getLogger(__name__)


class EditorAdapter(Protocol):
    """What a host editor must provide to run heading commands."""

    def get_lines(self) -> list[str]: ...

    def set_lines(self, lines: list[str]) -> None: ...

    def get_cursor_line(self) -> int: ...

    def set_cursor_line(self, index: int) -> None: ...

    def report_error(self, message: str) -> None: ...


@dataclass(slots=True)
class BufferAdapter:
    """In-memory EditorAdapter over a list of lines."""

    lines: list[str]
    cursor_line: int = 0
    errors: list[str] = field(default_factory=list)

    def get_lines(self) -> list[str]:
        return list(self.lines)

    def set_lines(self, lines: list[str]) -> None:
        self.lines = list(lines)

    def get_cursor_line(self) -> int:
        return self.cursor_line

    def set_cursor_line(self, index: int) -> None:
        self.cursor_line = index

    def report_error(self, message: str) -> None:
        self.errors.append(message)


# ---------------------------------------------------------------------------
# Pure buffer operations
# ---------------------------------------------------------------------------


def _style_index(styles: Sequence[SectionStyle], style: SectionStyle) -> int | None:
    return next((i for i, candidate in enumerate(styles) if candidate == style), None)


def _new_heading(buffer: Buffer, index: int, style: SectionStyle) -> int:
    # Give the plain text line an underline, then decorate it properly.
    buffer.insert(index + 1, style.char)
    return change_section(buffer, index, False, style.char, style.overline)


def _apply_level(
    buffer: Buffer,
    index: int,
    choose: Callable[[int | None], int],
    styles: Sequence[SectionStyle],
    section_chars: str,
) -> int | None:
    """Redecorate the heading at ``index`` with ``styles[choose(current)]``.

    ``current`` is the table position of the heading's present style, or
    None when the style is not in the table.  A plain text line with no
    decoration is not touched.
    """
    found = locate_heading(buffer, index, section_chars=section_chars)
    if found is None:
        return None
    current = SectionStyle(buffer[found.underline_index][0], found.has_overline)
    target = styles[choose(_style_index(styles, current))]
    log.debug(
        "Restyling heading at line %d from %r to %r",
        found.title_index + 1, current, target,
    )
    return change_section(
        buffer, found.title_index, found.has_overline, target.char, target.overline,
    )


def cycle_section(
    buffer: Buffer,
    index: int,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    step: int = 1,
    section_chars: str = SECTION_CHARS,
) -> int | None:
    """Step the heading at ``index`` through ``styles``, wrapping around.

    On plain text that is not yet a heading, decorate it like the nearest
    heading above it, or with the first style when there is none.
    """
    if not styles:
        return None
    found = locate_heading(buffer, index, section_chars=section_chars)
    if found is None:
        if not is_title_text(buffer[index], section_chars):
            return None
        previous = (
            find_last_section(buffer, index - 1, section_chars=section_chars)
            if index > 0
            else None
        )
        return _new_heading(buffer, index, previous.style if previous is not None else styles[0])

    def choose(current: int | None) -> int:
        if current is None:
            return 0
        return (current + step) % len(styles)

    return _apply_level(buffer, index, choose, styles, section_chars)


def promote_section(
    buffer: Buffer,
    index: int,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    section_chars: str = SECTION_CHARS,
) -> int | None:
    """Move the heading at ``index`` one level up; level 0 stays put."""

    def choose(current: int | None) -> int:
        return 0 if current is None else max(current - 1, 0)

    return _apply_level(buffer, index, choose, styles, section_chars)


def demote_section(
    buffer: Buffer,
    index: int,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    section_chars: str = SECTION_CHARS,
) -> int | None:
    """Move the heading at ``index`` one level down; the last level stays put."""

    def choose(current: int | None) -> int:
        return 0 if current is None else min(current + 1, len(styles) - 1)

    return _apply_level(buffer, index, choose, styles, section_chars)


def set_section_level(
    buffer: Buffer,
    index: int,
    level: int,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    section_chars: str = SECTION_CHARS,
) -> int | None:
    """Decorate the line at ``index`` as a heading of ``level``.

    Works on existing headings and on plain text lines alike.
    """
    if level < 0:
        raise SectionsError(f"Heading level must be >= 0, got {level}")
    if level >= len(styles):
        raise DepthExceeded(level, len(styles) - 1)
    style = styles[level]
    found = locate_heading(buffer, index, section_chars=section_chars)
    if found is None:
        if not is_title_text(buffer[index], section_chars):
            return None
        return _new_heading(buffer, index, style)
    return change_section(
        buffer, found.title_index, found.has_overline, style.char, style.overline,
    )


# ---------------------------------------------------------------------------
# Adapter-level commands
# ---------------------------------------------------------------------------


def _run(adapter: EditorAdapter, edit: Callable[[list[str], int], int | None]) -> bool:
    lines = adapter.get_lines()
    cursor = adapter.get_cursor_line()
    if not 0 <= cursor < len(lines):
        adapter.report_error(f"Cursor line {cursor + 1} is outside the buffer")
        return False
    try:
        new_title = edit(lines, cursor)
    except SectionsError as exc:
        log.warning("Heading command failed: %s", exc)
        adapter.report_error(str(exc))
        return False
    adapter.set_lines(lines)
    if new_title is not None:
        adapter.set_cursor_line(new_title)
    return True


def run_cycle(
    adapter: EditorAdapter,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    step: int = 1,
) -> bool:
    return _run(adapter, lambda lines, cursor: cycle_section(lines, cursor, styles, step=step))


def run_promote(adapter: EditorAdapter, styles: Sequence[SectionStyle] = CANONICAL_STYLES) -> bool:
    return _run(adapter, lambda lines, cursor: promote_section(lines, cursor, styles))


def run_demote(adapter: EditorAdapter, styles: Sequence[SectionStyle] = CANONICAL_STYLES) -> bool:
    return _run(adapter, lambda lines, cursor: demote_section(lines, cursor, styles))


def run_set_level(
    adapter: EditorAdapter,
    level: int,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
) -> bool:
    return _run(adapter, lambda lines, cursor: set_section_level(lines, cursor, level, styles))


def run_standardize(
    adapter: EditorAdapter,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
) -> bool:
    """Normalize every heading; keep the cursor on the line it was on."""

    def edit(lines: list[str], cursor: int) -> int | None:
        sections = all_sections(lines)
        levels = section_levels(sections)
        to_standard_sections(lines, styles)
        # Every heading titled at or above the cursor that gained or lost an
        # overline moved the cursor's line by one.
        shift = 0
        for section, level in zip(sections, levels):
            if section.title_index > cursor:
                break
            shift += int(styles[level].overline) - int(section.has_overline)
        if not lines:
            return None
        return min(max(cursor + shift, 0), len(lines) - 1)

    return _run(adapter, edit)
