"""Rewrite a whole document to the canonical heading style table."""

from __future__ import annotations

from collections.abc import Sequence

from rst_sections.decoration import SECTION_CHARS
from rst_sections.errors import DepthExceeded
from rst_sections.io_utils import join_lines, split_lines
from rst_sections.levels import section_levels
from rst_sections.rewriter import change_section
from rst_sections.scanner import all_sections
from rst_sections.types import Buffer, Lines, SectionRecord, SectionStyle

# Canonical decoration by level, after the Python documentation convention:
#   # with overline, for parts
#   * with overline, for chapters
#   =, -, ^, " and ' for sections and below
CANONICAL_STYLES: tuple[SectionStyle, ...] = (
    SectionStyle("#", True),
    SectionStyle("*", True),
    SectionStyle("=", False),
    SectionStyle("-", False),
    SectionStyle("^", False),
    SectionStyle('"', False),
    SectionStyle("'", False),
)

MAX_LEVELS = 7


def _plan_rewrites(
    buffer: Lines,
    styles: Sequence[SectionStyle],
    section_chars: str,
) -> list[tuple[SectionRecord, SectionStyle]]:
    """Validate the whole document and pair each heading with its new style.

    Pairs come tail first: each rewrite may shift every later line by one,
    so earlier title indices stay valid until their turn comes.
    """
    sections = all_sections(buffer, section_chars=section_chars)
    levels = section_levels(sections)
    max_level = len(styles) - 1
    for level in levels:
        if level > max_level:
            raise DepthExceeded(level, max_level)
    return [
        (section, styles[level])
        for section, level in zip(reversed(sections), reversed(levels))
    ]


def to_standard_sections(
    buffer: Buffer,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    section_chars: str = SECTION_CHARS,
) -> None:
    """Redecorate every heading in ``buffer`` with ``styles[level]``.

    Levels are inferred with ``section_levels``.  The whole document is
    validated before the first edit, so on error the buffer is unchanged.

    Raises:
        TitleLevelInconsistent: the document has no consistent hierarchy.
        DepthExceeded: a level has no entry in ``styles``.
    """
    for section, style in _plan_rewrites(buffer, styles, section_chars):
        change_section(
            buffer,
            section.title_index,
            section.has_overline,
            style.char,
            style.overline,
        )


def standardize_text(
    text: str,
    styles: Sequence[SectionStyle] = CANONICAL_STYLES,
    *,
    section_chars: str = SECTION_CHARS,
) -> str:
    """Apply ``to_standard_sections`` to a whole document string.

    Every line keeps its own terminator (CRLF, CR, LF or none), so mixed
    endings survive.  An inserted overline takes its title's terminator;
    an underline keeps the one it had.
    """
    lines, endings = split_lines(text)
    for section, style in _plan_rewrites(lines, styles, section_chars):
        title_index = section.title_index
        if section.has_overline and not style.overline:
            del endings[title_index - 1]
        elif style.overline and not section.has_overline:
            endings.insert(title_index, endings[title_index])
        change_section(lines, title_index, section.has_overline, style.char, style.overline)
    return join_lines(lines, endings)
