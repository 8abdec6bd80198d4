"""Tests for heading level inference."""
import pytest

from rst_sections.errors import DisorderedInput, SectionsError, TitleLevelInconsistent
from rst_sections.levels import level_styles, section_levels
from rst_sections.types import SectionRecord, SectionStyle

MIXED_SECTIONS = (
    (2, "~", False),
    (8, "#", True),
    (15, "+", False),
    (21, "=", True),
    (26, "#", True),
    (31, "+", False),
)


class TestSectionLevels:
    def test_empty(self) -> None:
        assert section_levels(()) == ()

    def test_first_occurrence_order(self) -> None:
        assert section_levels(MIXED_SECTIONS) == (0, 1, 2, 3, 1, 2)

    def test_accepts_records(self) -> None:
        records = [SectionRecord(*section) for section in MIXED_SECTIONS]
        assert section_levels(records) == (0, 1, 2, 3, 1, 2)

    def test_deterministic(self) -> None:
        assert section_levels(MIXED_SECTIONS) == section_levels(MIXED_SECTIONS)

    def test_return_to_outer_level(self) -> None:
        sections = ((0, "=", True), (4, "-", False), (8, "^", False), (12, "=", True))
        assert section_levels(sections) == (0, 1, 2, 0)

    def test_overline_makes_distinct_style(self) -> None:
        sections = ((0, "=", True), (5, "=", False), (10, "=", True), (15, "=", False))
        assert section_levels(sections) == (0, 1, 0, 1)

    def test_unsorted_input(self) -> None:
        sections = ((8, "~", False), (2, "#", True), (15, "+", False))
        with pytest.raises(DisorderedInput):
            section_levels(sections)

    def test_duplicate_index_is_disordered(self) -> None:
        with pytest.raises(DisorderedInput):
            section_levels(((3, "=", False), (3, "-", False)))

    def test_skipped_level(self) -> None:
        sections = MIXED_SECTIONS[:5] + ((31, "=", True),)
        with pytest.raises(TitleLevelInconsistent) as excinfo:
            section_levels(sections)
        assert excinfo.value.title_index == 31
        assert excinfo.value.depth == 3
        assert excinfo.value.previous_depth == 1

    def test_new_style_below_shallow_heading(self) -> None:
        sections = (
            (0, "#", True),
            (3, "*", True),
            (6, "=", False),
            (9, "*", True),
            (12, "-", False),
        )
        with pytest.raises(TitleLevelInconsistent):
            section_levels(sections)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            section_levels(((5, "=", False), (1, "-", False)))
        assert issubclass(TitleLevelInconsistent, SectionsError)


class TestLevelStyles:
    def test_first_seen_order(self) -> None:
        assert level_styles(MIXED_SECTIONS) == (
            SectionStyle("~", False),
            SectionStyle("#", True),
            SectionStyle("+", False),
            SectionStyle("=", True),
        )

    def test_empty(self) -> None:
        assert level_styles(()) == ()
