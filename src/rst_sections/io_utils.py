"""I/O helpers for JSON config files, JSON output and text documents."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import orjson

# Only CRLF, CR and LF end a line; form feeds and Unicode separators stay
# inside the line, as editors show them.
_LINE_END_RE = re.compile(r"\r\n|\r|\n")


def load_json(path: Path) -> Any:
    """Load JSON from a file using orjson."""
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON using orjson."""
    path.parent.mkdir(parents=True, exist_ok=True)
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    path.write_bytes(orjson.dumps(obj, option=opts))


def dump_json_bytes(obj: Any) -> bytes:
    """Serialize ``obj`` as indented JSON followed by a newline."""
    return orjson.dumps(obj, option=orjson.OPT_INDENT_2) + b"\n"


def read_document(path: Path) -> str:
    """Read a text document without translating its line endings."""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_document(path: Path, text: str) -> None:
    """Write a text document verbatim, line endings included."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split ``text`` into lines and their terminators ("" for an unterminated last line)."""
    lines: list[str] = []
    endings: list[str] = []
    pos = 0
    for match in _LINE_END_RE.finditer(text):
        lines.append(text[pos:match.start()])
        endings.append(match.group())
        pos = match.end()
    if pos < len(text):
        lines.append(text[pos:])
        endings.append("")
    return lines, endings


def join_lines(lines: list[str], endings: list[str]) -> str:
    """Inverse of ``split_lines``."""
    return "".join(line + ending for line, ending in zip(lines, endings, strict=True))
