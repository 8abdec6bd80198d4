"""Infer heading nesting levels from decoration signatures.

reStructuredText has no explicit heading levels.  A level is bound to a
decoration signature ``(char, has_overline)`` the first time that signature
is seen: the first signature is level 0, each new one is one level deeper
than the deepest seen so far.

Consistency rule: going down, a heading may only be one level deeper than
the heading before it; going up, it may return to any shallower level.
A document that violates this (for example a level-3 signature directly
under a level-1 heading) has no consistent hierarchy.
"""

from __future__ import annotations

from collections.abc import Iterable

from rst_sections.errors import DisorderedInput, TitleLevelInconsistent
from rst_sections.types import SectionRecord, SectionStyle


def section_levels(sections: Iterable[SectionRecord | tuple[int, str, bool]]) -> tuple[int, ...]:
    """Return one zero-based level per section, in input order.

    ``sections`` must be in strictly ascending title-index order.

    Raises:
        DisorderedInput: title indices are not ascending.
        TitleLevelInconsistent: a heading skips one or more levels.
    """
    style_levels: dict[SectionStyle, int] = {}
    levels: list[int] = []
    previous_index = -1
    previous_level = -1

    for title_index, char, has_overline in sections:
        if title_index <= previous_index:
            raise DisorderedInput(
                f"Sections must be in document order: line {title_index + 1} "
                f"follows line {previous_index + 1}",
            )
        style = SectionStyle(char, bool(has_overline))
        level = style_levels.get(style)
        if level is None:
            level = len(style_levels)
            style_levels[style] = level
        if level > previous_level + 1:
            raise TitleLevelInconsistent(title_index, level, previous_level)
        levels.append(level)
        previous_index = title_index
        previous_level = level

    return tuple(levels)


def level_styles(
    sections: Iterable[SectionRecord | tuple[int, str, bool]],
) -> tuple[SectionStyle, ...]:
    """Return the signatures of a document in level order (level 0 first)."""
    seen: dict[SectionStyle, None] = {}
    for _, char, has_overline in sections:
        seen.setdefault(SectionStyle(char, bool(has_overline)), None)
    return tuple(seen)
