"""Exception hierarchy for section analysis and rewriting.

Every error is a ``ValueError`` so callers written against plain
``ValueError`` keep working; catch ``SectionsError`` for the whole family.
"""

from __future__ import annotations


class SectionsError(ValueError):
    """Base class for all heading analysis errors."""


class DisorderedInput(SectionsError):
    """Raised when section records are not in ascending title-index order."""


class TitleLevelInconsistent(SectionsError):
    """Raised when heading decorations do not describe a consistent hierarchy."""

    def __init__(self, title_index: int, depth: int, previous_depth: int) -> None:
        self.title_index = title_index
        self.depth = depth
        self.previous_depth = previous_depth
        super().__init__(
            f"Title level inconsistent at line {title_index + 1}: "
            f"level {depth} follows level {previous_depth}",
        )


class DepthExceeded(SectionsError):
    """Raised when a document nests deeper than the style table supports."""

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"document nesting too deep to normalize: level {depth} "
            f"exceeds maximum level {max_depth}",
        )


class ConfigError(SectionsError):
    """Raised when a style configuration is invalid."""
