"""Heading style configuration.

The canonical table maps levels 0..6 to decorations.  Levels 0 and 1 carry
an overline, deeper levels only an underline.  A JSON file may override the
table and the set of characters accepted as rules::

    {
      "section_chars": "#*=-^\\"'~",
      "styles": [["#", true], ["*", true], ["=", false], ["-", false]]
    }

Missing keys fall back to the built-in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rst_sections.canonical import CANONICAL_STYLES, MAX_LEVELS
from rst_sections.decoration import SECTION_CHARS
from rst_sections.errors import ConfigError
from rst_sections.io_utils import load_json
from rst_sections.types import SectionStyle

OVERLINED_LEVELS = 2


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Decoration characters and level-indexed canonical styles."""

    section_chars: str = SECTION_CHARS
    styles: tuple[SectionStyle, ...] = CANONICAL_STYLES

    @classmethod
    def default(cls) -> StyleConfig:
        return cls()

    @property
    def max_level(self) -> int:
        return len(self.styles) - 1

    def validate(self) -> StyleConfig:
        """Return self, or raise ConfigError describing the first problem."""
        if not self.section_chars:
            raise ConfigError("section_chars cannot be empty")
        stray = sorted(set(self.section_chars) - set(SECTION_CHARS))
        if stray:
            raise ConfigError(f"section_chars must be ASCII punctuation, got {stray}")
        if not self.styles:
            raise ConfigError("styles cannot be empty")
        if len(self.styles) > MAX_LEVELS:
            raise ConfigError(
                f"styles supports at most {MAX_LEVELS} levels, got {len(self.styles)}",
            )
        seen: set[SectionStyle] = set()
        for level, style in enumerate(self.styles):
            if style.char not in self.section_chars:
                raise ConfigError(
                    f"level {level} char {style.char!r} is not in section_chars",
                )
            if style.overline != (level < OVERLINED_LEVELS):
                expected = "needs" if level < OVERLINED_LEVELS else "must not have"
                raise ConfigError(f"level {level} {expected} an overline")
            if style in seen:
                raise ConfigError(f"level {level} repeats style {style.char!r}")
            seen.add(style)
        return self


def _parse_styles(raw: Any) -> tuple[SectionStyle, ...]:
    if not isinstance(raw, list):
        raise ConfigError("styles must be a list of [char, overline] pairs")
    styles: list[SectionStyle] = []
    for item in raw:
        if (
            not isinstance(item, list)
            or len(item) != 2
            or not isinstance(item[0], str)
            or not isinstance(item[1], bool)
        ):
            raise ConfigError(f"Invalid style entry: {item!r}")
        try:
            styles.append(SectionStyle(item[0], item[1]))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    return tuple(styles)


def style_config_from_dict(payload: Any) -> StyleConfig:
    """Build and validate a StyleConfig from a decoded JSON object."""
    if not isinstance(payload, dict):
        raise ConfigError("Style config payload must be an object")
    unknown = sorted(set(payload) - {"section_chars", "styles"})
    if unknown:
        raise ConfigError(f"Unknown style config keys: {unknown}")
    section_chars = payload.get("section_chars", SECTION_CHARS)
    if not isinstance(section_chars, str):
        raise ConfigError("section_chars must be a string")
    styles = _parse_styles(payload["styles"]) if "styles" in payload else CANONICAL_STYLES
    return StyleConfig(section_chars=section_chars, styles=styles).validate()


def load_style_config(path: Path) -> StyleConfig:
    """Load a StyleConfig from a JSON file."""
    try:
        payload = load_json(path)
    except ValueError as exc:
        # orjson.JSONDecodeError subclasses ValueError.
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    return style_config_from_dict(payload)


def style_config_to_dict(config: StyleConfig) -> dict[str, Any]:
    return {
        "section_chars": config.section_chars,
        "styles": [[style.char, style.overline] for style in config.styles],
    }
