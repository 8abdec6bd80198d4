#!/usr/bin/env python3
"""Print the heading outline of a reStructuredText document as JSON.

One entry per heading with its 1-based line number, title text, decoration
character, overline flag and inferred level.

Usage:
    python3 scripts/section_outline.py --file docs/index.rst
    python3 scripts/section_outline.py --file docs/index.rst --json-out outline.json

Structured JSON output goes to stdout; human messages go to stderr.
Exit status: 0 success, 2 error (unreadable input or inconsistent headings).
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from rst_sections.config import StyleConfig, load_style_config
from rst_sections.errors import SectionsError
from rst_sections.io_utils import dump_json_bytes, read_document, save_json, split_lines
from rst_sections.levels import level_styles, section_levels
from rst_sections.scanner import all_sections

log = logging.getLogger("section_outline")


def dump_json(obj: Any) -> None:
    sys.stdout.buffer.write(dump_json_bytes(obj))


def build_outline(lines: list[str], config: StyleConfig) -> dict[str, Any]:
    """Describe every heading in ``lines`` and the document's level styles."""
    sections = all_sections(lines, section_chars=config.section_chars)
    levels = section_levels(sections)
    headings = [
        {
            "line": section.title_index + 1,
            "title": lines[section.title_index].strip(),
            "char": section.char,
            "overline": section.has_overline,
            "level": level,
        }
        for section, level in zip(sections, levels)
    ]
    return {
        "heading_count": len(headings),
        "level_count": len(set(levels)),
        "level_styles": [[style.char, style.overline] for style in level_styles(sections)],
        "headings": headings,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the heading outline of a reStructuredText document."
    )
    parser.add_argument("--file", required=True, type=Path, help="Document to read")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="JSON style config (section_chars, styles)",
    )
    parser.add_argument(
        "--json-out", type=Path, default=None,
        help="Also write the outline to this path",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_style_config(args.config) if args.config else StyleConfig.default()
        text = read_document(args.file)
        outline = build_outline(split_lines(text)[0], config)
    except OSError as exc:
        log.error("Cannot read input: %s", exc)
        return 2
    except UnicodeDecodeError as exc:
        log.error("Cannot decode input as UTF-8: %s", exc)
        return 2
    except SectionsError as exc:
        log.error("%s: %s", args.file, exc)
        return 2

    log.debug("Found %d headings in %s", outline["heading_count"], args.file)
    if args.json_out is not None:
        save_json(outline, args.json_out)
    dump_json(outline)
    return 0


if __name__ == "__main__":
    sys.exit(main())
