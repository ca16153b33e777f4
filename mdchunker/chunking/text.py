"""
Paragraph-based text chunking.

Combines blank-line separated paragraphs until the size limit is reached.
A paragraph is never split internally, so a single paragraph longer than
the limit is emitted as its own chunk.
"""

import re
from typing import List, Optional

from .models import Chunk

PARAGRAPH_BREAK = re.compile(r'\n\n+')
PARAGRAPH_SEPARATOR = '\n\n'


def split_paragraphs(text: str, max_chunk_size: int, reserve: int = 0,
                     reserve_first: bool = False) -> List[str]:
    """Group paragraphs into size-bounded chunk bodies.

    ``reserve`` is the number of characters held back in every chunk after
    the first (and in the first as well when ``reserve_first`` is set), for
    a heading line the caller prepends to those chunks.
    """
    bodies = []
    current = ''

    for para in PARAGRAPH_BREAK.split(text):
        para = para.strip()

        # Skip empty paragraphs
        if not para:
            continue

        if not current:
            current = para
            continue

        budget = max_chunk_size - (reserve if bodies or reserve_first else 0)
        if len(current) + len(PARAGRAPH_SEPARATOR) + len(para) > budget:
            bodies.append(current)
            current = para
        else:
            current += PARAGRAPH_SEPARATOR + para

    # Don't forget the last chunk
    if current:
        bodies.append(current)

    return bodies


def chunk_text(text: str, max_chunk_size: int = 1000) -> List[Chunk]:
    """Chunk plain text while preserving paragraph boundaries."""
    return [Chunk(text=body) for body in split_paragraphs(text, max_chunk_size)]


def with_heading(body: str, heading: Optional[str], max_chunk_size: int) -> str:
    """Prepend a heading line to a continuation chunk body.

    The heading is left off when it would push a body that fits on its own
    over the limit.
    """
    if not heading or body.startswith(heading):
        return body
    prefixed = heading + PARAGRAPH_SEPARATOR + body
    if len(prefixed) <= max_chunk_size or len(body) > max_chunk_size:
        return prefixed
    return body


def paragraph_fallback(text: str, max_chunk_size: int, section: Optional[str],
                       heading: Optional[str] = None,
                       prefix_first: bool = False) -> List[Chunk]:
    """Paragraph-split an oversized section, keeping its label.

    Every sub-chunk after the first (and the first too with ``prefix_first``)
    gets the heading line re-prepended so it still reads in context.
    """
    reserve = len(heading) + len(PARAGRAPH_SEPARATOR) if heading else 0
    bodies = split_paragraphs(text, max_chunk_size, reserve=reserve,
                              reserve_first=prefix_first)

    chunks = []
    for i, body in enumerate(bodies):
        if i > 0 or prefix_first:
            body = with_heading(body, heading, max_chunk_size)
        chunks.append(Chunk(text=body, section=section))
    return chunks
