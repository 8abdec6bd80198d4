"""In-place rewrite of one heading's decoration."""

from __future__ import annotations

from rst_sections.decoration import make_rule, rule_width
from rst_sections.types import Buffer


def change_section(
    buffer: Buffer,
    title_index: int,
    had_overline: bool,
    new_char: str,
    new_overline: bool,
) -> int:
    """Redecorate the heading titled at ``title_index``; return its new index.

    The old overline (when ``had_overline``) and the underline are replaced
    by rules of ``new_char`` as wide as the title, indentation included.
    Adding an overline shifts the title down one line, removing one shifts
    it up.  Surrounding headings are neither inspected nor validated.
    """
    rule = make_rule(new_char, rule_width(buffer[title_index]))
    buffer[title_index + 1] = rule
    if had_overline and new_overline:
        buffer[title_index - 1] = rule
        return title_index
    if had_overline:
        del buffer[title_index - 1]
        return title_index - 1
    if new_overline:
        buffer.insert(title_index, rule)
        return title_index + 1
    return title_index
