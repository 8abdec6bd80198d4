#!/usr/bin/env python3
"""Rewrite reStructuredText heading decorations to the canonical style table.

Levels are inferred from the order in which decorations first appear, then
every heading is redecorated with the canonical style for its level.

Usage:
    # Print the normalized document to stdout
    python3 scripts/normalize_sections.py --file docs/index.rst

    # Rewrite the file in place
    python3 scripts/normalize_sections.py --file docs/index.rst --in-place

    # Exit 1 if the file is not already normalized (nothing is written)
    python3 scripts/normalize_sections.py --file docs/index.rst --check

Exit status: 0 success, 1 ``--check`` found changes, 2 error.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rst_sections.canonical import standardize_text
from rst_sections.config import StyleConfig, load_style_config
from rst_sections.errors import SectionsError
from rst_sections.io_utils import read_document, write_document

log = logging.getLogger("normalize_sections")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrite heading decorations to the canonical style table."
    )
    parser.add_argument("--file", required=True, type=Path, help="Document to normalize")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="JSON style config (section_chars, styles)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--in-place", action="store_true", help="Rewrite the file")
    mode.add_argument(
        "--check", action="store_true",
        help="Only report whether the file would change",
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
        original = read_document(args.file)
        normalized = standardize_text(
            original, config.styles, section_chars=config.section_chars,
        )
    except OSError as exc:
        log.error("Cannot read input: %s", exc)
        return 2
    except UnicodeDecodeError as exc:
        log.error("Cannot decode input as UTF-8: %s", exc)
        return 2
    except SectionsError as exc:
        log.error("%s: %s", args.file, exc)
        return 2

    changed = normalized != original
    if args.check:
        if changed:
            log.info("%s: headings are not normalized", args.file)
            return 1
        log.debug("%s: headings already normalized", args.file)
        return 0
    if args.in_place:
        if changed:
            write_document(args.file, normalized)
            log.info("%s: headings normalized", args.file)
        return 0
    sys.stdout.write(normalized)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
