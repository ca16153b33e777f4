"""
Structure detection for markdown documents.

Finds the heading level that carries a document's primary structure and
recognises numbered item markers such as ``1. ``, ``1\\. `` and ``5, 6\\. ``.
"""

import re
from typing import Optional, Pattern

MIN_HEADING_LEVEL = 2
MAX_HEADING_LEVEL = 6

NUMBERED_ITEM_PATTERN = re.compile(r'^\d+(?:, *\d+)*\\?\. ', re.MULTILINE)


def heading_pattern(level: int) -> Pattern:
    """Pattern matching a line-start heading of exactly ``level`` hashes."""
    return re.compile(rf"^{'#' * level} (?!#)", re.MULTILINE)


def count_headings(text: str, level: int) -> int:
    """Count headings of exactly the given level."""
    return len(heading_pattern(level).findall(text))


def _lowest_level(text: str, min_count: int) -> Optional[int]:
    for level in range(MIN_HEADING_LEVEL, MAX_HEADING_LEVEL + 1):
        if count_headings(text, level) >= min_count:
            return level
    return None


def detect_heading_level(text: str) -> Optional[int]:
    """Return the lowest heading level (2-6) that appears at least twice.

    A single stray heading is not treated as document structure.
    """
    return _lowest_level(text, 2)


def find_any_heading_level(text: str) -> Optional[int]:
    """Return the lowest heading level with at least one occurrence."""
    return _lowest_level(text, 1)


def has_markdown_headings(text: str) -> bool:
    """Check whether the text is organised by repeated markdown headings."""
    return detect_heading_level(text) is not None


def detect_numbered_items(text: str) -> bool:
    """Check whether the text contains two or more numbered items."""
    return len(NUMBERED_ITEM_PATTERN.findall(text)) >= 2
