"""
Heading-aware markdown chunking and the smart dispatcher.

Detects the primary heading level automatically and splits recursively,
falling back to paragraph chunking for documents without headings.
"""

from typing import List

from ..utils.logging import get_logger
from .detection import detect_heading_level, find_any_heading_level, has_markdown_headings
from .hierarchical import chunk_at_level
from .models import Chunk
from .text import chunk_text

logger = get_logger(__name__)

DEFAULT_MARKDOWN_MAX_SIZE = 1500
DEFAULT_PLAIN_MAX_SIZE = 1000


def chunk_markdown(text: str, max_chunk_size: int = DEFAULT_MARKDOWN_MAX_SIZE) -> List[Chunk]:
    """Chunk markdown hierarchically, starting at its primary heading level."""
    level = detect_heading_level(text)
    if level is None:
        # A document with a single heading is still heading-structured
        level = find_any_heading_level(text)
    if level is None:
        logger.debug("No markdown headings found, using paragraph chunking")
        return chunk_text(text, max_chunk_size)

    logger.debug(f"Chunking markdown at heading level {level}")
    return chunk_at_level(text, level, max_chunk_size)


def smart_chunk(text: str, markdown_max_size: int = DEFAULT_MARKDOWN_MAX_SIZE,
                plain_max_size: int = DEFAULT_PLAIN_MAX_SIZE) -> List[Chunk]:
    """Pick markdown or paragraph chunking based on the document's headings.

    Markdown sections may run larger than plain-text chunks since they carry
    more retrievable context per unit.
    """
    if has_markdown_headings(text):
        return chunk_markdown(text, markdown_max_size)
    return chunk_text(text, plain_max_size)
