"""
Verse-aware splitting for sections made of numbered items.

Long enumerated content (scripture verses, legal clauses) is cut on item
boundaries, and every chunk is labelled with the verse range it covers,
e.g. ``"LAYING PLANS (1-5)"``.
"""

import re
from typing import List, Optional, Tuple

from ..utils.logging import get_logger
from .models import Chunk
from .text import PARAGRAPH_SEPARATOR, paragraph_fallback, with_heading

logger = get_logger(__name__)

ITEM_SPLIT = re.compile(r'(?=^\d+(?:, *\d+)*\\?\. )', re.MULTILINE)
ITEM_MARKER = re.compile(r'^(\d+(?:, *\d+)*)\\?\. ')


def extract_verse_numbers(item: str) -> Tuple[int, int]:
    """Get the first and last verse numbers from an item's marker.

    ``"1\\. ..."`` gives ``(1, 1)`` and ``"5, 6\\. ..."`` gives ``(5, 6)``.
    """
    match = ITEM_MARKER.match(item)
    if not match:
        return 0, 0
    numbers = [int(n) for n in re.split(r',\s*', match.group(1))]
    return numbers[0], numbers[-1]


def range_label(section: Optional[str], first: int, last: int) -> str:
    """Append a verse range to a section label."""
    verses = f"({first})" if first == last else f"({first}-{last})"
    return f"{section} {verses}" if section else verses


class _VerseGroup:
    """Consecutive items collected for one chunk."""

    def __init__(self, continuation: bool, prefix_len: int):
        self.items: List[str] = []
        self.first: Optional[int] = None
        self.last: Optional[int] = None
        self.continuation = continuation
        self.prefix_len = prefix_len

    def length_with(self, item: str) -> int:
        """Rendered length if ``item`` were added, heading prefix included."""
        length = sum(len(i) for i in self.items) + len(item)
        length += len(PARAGRAPH_SEPARATOR) * len(self.items)
        if self.continuation:
            length += self.prefix_len
        return length

    def add(self, item: str, first: int, last: int) -> None:
        self.items.append(item)
        if self.first is None:
            self.first = first
        self.last = last

    def body(self) -> str:
        return PARAGRAPH_SEPARATOR.join(self.items)


def split_numbered_items(text: str, max_chunk_size: int, section: Optional[str],
                         heading: Optional[str] = None) -> List[Chunk]:
    """Split a section on numbered items and group them into chunks.

    ``heading`` is the section's heading line (``"## Title"``); it is
    prepended to every group after the first.
    """
    parts = ITEM_SPLIT.split(text)
    chunks: List[Chunk] = []

    # parts[0] holds the heading and any commentary before the first item
    intro = parts[0].strip()
    if len(intro) > max_chunk_size:
        chunks.extend(paragraph_fallback(intro, max_chunk_size, section, heading))
    elif intro:
        chunks.append(Chunk(text=intro, section=section))

    prefix_len = len(heading) + len(PARAGRAPH_SEPARATOR) if heading else 0
    group = _VerseGroup(continuation=False, prefix_len=prefix_len)

    def flush() -> None:
        nonlocal group
        if not group.items:
            return
        body = group.body()
        if group.continuation:
            body = with_heading(body, heading, max_chunk_size)
        chunks.append(Chunk(text=body, section=range_label(section, group.first, group.last)))
        group = _VerseGroup(continuation=True, prefix_len=prefix_len)

    for item in parts[1:]:
        item = item.strip()
        if not item:
            continue

        first, last = extract_verse_numbers(item)

        # An oversized item gets its own paragraph-level split
        if len(item) > max_chunk_size:
            flush()
            logger.debug(f"Item {first}-{last} exceeds {max_chunk_size} chars, splitting by paragraph")
            chunks.extend(paragraph_fallback(
                item, max_chunk_size, range_label(section, first, last),
                heading=heading, prefix_first=group.continuation,
            ))
            group = _VerseGroup(continuation=True, prefix_len=prefix_len)
            continue

        if group.items and group.length_with(item) > max_chunk_size:
            flush()

        group.add(item, first, last)

    flush()
    return chunks
