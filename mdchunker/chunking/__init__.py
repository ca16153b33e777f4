"""
Document chunking module for mdchunker.
"""

from .models import Chunk
from .text import chunk_text
from .detection import detect_heading_level, has_markdown_headings, detect_numbered_items
from .markdown import chunk_markdown, smart_chunk
from .records import ChunkRecord, build_records
from .strategies import ChunkingStrategy, PlainChunkStrategy, MarkdownChunkStrategy, SmartChunkStrategy, get_strategy
from .chunker import DocumentChunker, EmptyDocumentError

__all__ = [
    "Chunk",
    "chunk_text",
    "chunk_markdown",
    "smart_chunk",
    "detect_heading_level",
    "has_markdown_headings",
    "detect_numbered_items",
    "ChunkRecord",
    "build_records",
    "ChunkingStrategy",
    "PlainChunkStrategy",
    "MarkdownChunkStrategy",
    "SmartChunkStrategy",
    "get_strategy",
    "DocumentChunker",
    "EmptyDocumentError"
]
