"""Detect, level and rewrite reStructuredText section heading decorations."""

from rst_sections.canonical import (
    CANONICAL_STYLES,
    MAX_LEVELS,
    standardize_text,
    to_standard_sections,
)
from rst_sections.commands import (
    BufferAdapter,
    EditorAdapter,
    cycle_section,
    demote_section,
    promote_section,
    run_cycle,
    run_demote,
    run_promote,
    run_set_level,
    run_standardize,
    set_section_level,
)
from rst_sections.config import (
    StyleConfig,
    load_style_config,
    style_config_from_dict,
    style_config_to_dict,
)
from rst_sections.decoration import SECTION_CHARS, is_underline, make_rule
from rst_sections.errors import (
    ConfigError,
    DepthExceeded,
    DisorderedInput,
    SectionsError,
    TitleLevelInconsistent,
)
from rst_sections.levels import level_styles, section_levels
from rst_sections.locator import line_under_over, locate_heading
from rst_sections.rewriter import change_section
from rst_sections.scanner import all_sections, find_last_section, last_section
from rst_sections.types import HeadingLocation, SectionRecord, SectionStyle

__all__ = [
    "BufferAdapter",
    "CANONICAL_STYLES",
    "ConfigError",
    "DepthExceeded",
    "DisorderedInput",
    "EditorAdapter",
    "HeadingLocation",
    "MAX_LEVELS",
    "SECTION_CHARS",
    "SectionRecord",
    "SectionStyle",
    "SectionsError",
    "StyleConfig",
    "TitleLevelInconsistent",
    "all_sections",
    "change_section",
    "cycle_section",
    "demote_section",
    "find_last_section",
    "is_underline",
    "last_section",
    "level_styles",
    "line_under_over",
    "load_style_config",
    "locate_heading",
    "make_rule",
    "promote_section",
    "run_cycle",
    "run_demote",
    "run_promote",
    "run_set_level",
    "run_standardize",
    "section_levels",
    "set_section_level",
    "standardize_text",
    "style_config_from_dict",
    "style_config_to_dict",
    "to_standard_sections",
]
