"""Tests for rst_sections.scanner heading collection."""
from pathlib import Path

from rst_sections.scanner import all_sections, find_last_section, last_section
from rst_sections.types import SectionRecord, SectionStyle

FIXTURES = Path(__file__).resolve().parent / "fixtures" / "rst"


def _load_lines(name: str) -> list[str]:
    return (FIXTURES / name).read_text(encoding="utf-8").split("\n")


class TestLastSection:
    def test_walks_back_through_edits(self) -> None:
        buf = "\nOne\n\nTwo\n\nThree\n+++++\n\nFour\n".split("\n")
        last = len(buf) - 1
        assert last_section(buf, last) == (5, "+", False)
        buf[4] = "+++++"
        assert last_section(buf, last) == (5, "+", True)
        buf[6] = ""
        assert last_section(buf, last) == (3, "+", False)
        buf[4] = "^"
        assert last_section(buf, last) == (3, "^", False)
        buf[4] = ""
        assert last_section(buf, last) == (None, None, None)
        buf[0] = "-------"
        assert last_section(buf, last) == (None, None, None)
        buf[2] = "-------"
        assert last_section(buf, last) == (1, "-", True)

    def test_index_on_title(self) -> None:
        buf = ["Title", "=====", "", "Body"]
        assert last_section(buf, 0) == (0, "=", False)

    def test_heading_after_index_ignored(self) -> None:
        buf = ["Body", "", "Title", "====="]
        assert last_section(buf, 1) == (None, None, None)

    def test_empty_buffer(self) -> None:
        assert find_last_section([], 0) is None


class TestFindLastSection:
    def test_returns_record(self) -> None:
        buf = ["****", "Ch", "****", "", "text"]
        found = find_last_section(buf, 4)
        assert found == SectionRecord(title_index=1, char="*", has_overline=True)
        assert found.style == SectionStyle("*", True)


class TestAllSections:
    def test_finds_every_heading_once(self) -> None:
        sections = all_sections(_load_lines("bad_levels.rst"))
        assert [section.as_triple() for section in sections] == [
            (2, "~", False),
            (8, "#", True),
            (15, "+", False),
            (21, "=", True),
            (26, "#", True),
            (31, "+", False),
        ]

    def test_records_unpack_as_triples(self) -> None:
        title_index, char, has_overline = all_sections(["T", "="])[0]
        assert (title_index, char, has_overline) == (0, "=", False)

    def test_no_headings(self) -> None:
        assert all_sections([]) == ()
        assert all_sections(["just", "text", "", "----"]) == ()

    def test_custom_section_chars(self) -> None:
        buf = ["A", "~~~", "", "B", "###"]
        sections = all_sections(buf, section_chars="~")
        assert [section.as_triple() for section in sections] == [(0, "~", False)]
