"""
Hierarchical heading-aware splitting.

Sections that fit the size limit are kept whole. Oversized sections descend
into the next heading level, and only fall back to numbered-item or
paragraph splitting when no deeper heading exists.
"""

import re
from typing import List, Optional

from ..utils.logging import get_logger
from .detection import MAX_HEADING_LEVEL, count_headings, detect_numbered_items
from .models import Chunk
from .numbered import split_numbered_items
from .text import paragraph_fallback

logger = get_logger(__name__)

SECTION_SEPARATOR = ' > '


def build_section_label(parent: Optional[str], heading_text: Optional[str]) -> Optional[str]:
    """Join a parent label and a heading into a hierarchical label."""
    if heading_text and parent:
        return f"{parent}{SECTION_SEPARATOR}{heading_text}"
    return heading_text or parent


def chunk_at_level(text: str, level: int, max_chunk_size: int,
                   parent_section: Optional[str] = None) -> List[Chunk]:
    """Split text on headings of the given level, recursing into oversized sections."""
    hashes = '#' * level
    # Lookahead keeps each heading attached to its own content
    segments = re.split(rf'(?=^{hashes} (?!#))', text, flags=re.MULTILINE)
    heading_re = re.compile(rf'^{hashes} (?!#)(.+)')
    chunks: List[Chunk] = []

    for segment in segments:
        segment = segment.strip()
        if not segment:
            continue

        match = heading_re.match(segment)
        heading_text = match.group(1).strip() if match else None
        section = build_section_label(parent_section, heading_text)

        if len(segment) <= max_chunk_size:
            chunks.append(Chunk(text=segment, section=section))
            continue

        if level < MAX_HEADING_LEVEL and count_headings(segment, level + 1) >= 1:
            logger.debug(f"Section {section!r} is oversized, descending to level {level + 1}")
            chunks.extend(chunk_at_level(segment, level + 1, max_chunk_size, section))
            continue

        heading = f"{hashes} {heading_text}" if heading_text else None
        if detect_numbered_items(segment):
            logger.debug(f"Section {section!r} is oversized, splitting on numbered items")
            chunks.extend(split_numbered_items(segment, max_chunk_size, section, heading))
        else:
            logger.debug(f"Section {section!r} is oversized, splitting on paragraphs")
            chunks.extend(paragraph_fallback(segment, max_chunk_size, section, heading))

    return chunks
