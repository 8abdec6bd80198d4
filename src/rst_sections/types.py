"""Core record types for heading detection and rewriting."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import TypeAlias


Buffer: TypeAlias = MutableSequence[str]
Lines: TypeAlias = Sequence[str]


@dataclass(frozen=True, slots=True)
class SectionStyle:
    """Decoration signature of a heading: rule character plus overline flag."""

    char: str
    overline: bool

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"decoration char must be one character, got {self.char!r}")


@dataclass(frozen=True, slots=True)
class HeadingLocation:
    """Line indices of one heading; the overline is optional."""

    title_index: int
    underline_index: int
    overline_index: int | None = None

    def __post_init__(self) -> None:
        if self.title_index < 0:
            raise ValueError(f"title_index must be >= 0, got {self.title_index}")
        if self.underline_index != self.title_index + 1:
            raise ValueError("underline must directly follow the title")
        if self.overline_index is not None and self.overline_index != self.title_index - 1:
            raise ValueError("overline must directly precede the title")

    @property
    def has_overline(self) -> bool:
        return self.overline_index is not None

    def as_triple(self) -> tuple[int, int | None, int | None]:
        return (self.title_index, self.underline_index, self.overline_index)


@dataclass(frozen=True, slots=True)
class SectionRecord:
    """A detected heading: title line index and its decoration signature."""

    title_index: int
    char: str
    has_overline: bool

    @property
    def style(self) -> SectionStyle:
        return SectionStyle(self.char, self.has_overline)

    def __iter__(self) -> Iterator[int | str | bool]:
        # Unpacks as (title_index, char, has_overline).
        yield self.title_index
        yield self.char
        yield self.has_overline

    def as_triple(self) -> tuple[int, str, bool]:
        return (self.title_index, self.char, self.has_overline)
