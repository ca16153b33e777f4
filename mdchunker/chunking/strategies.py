"""
Chunking strategies selectable by name.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Type

from ..config.settings import Config
from .markdown import chunk_markdown, smart_chunk
from .models import Chunk
from .text import chunk_text


class ChunkingStrategy(ABC):
   """Abstract base class for chunking strategies."""

   name = ""

   def __init__(self, config: Config):
       """Initialize chunking strategy with configuration."""
       self.config = config

   @abstractmethod
   def create_chunks(self, text: str) -> List[Chunk]:
       """Create chunks from document text."""
       pass


class PlainChunkStrategy(ChunkingStrategy):
   """Strategy for paragraph chunking, ignoring any markdown structure."""

   name = "plain"

   def create_chunks(self, text: str) -> List[Chunk]:
       return chunk_text(text, self.config.plain_max_size)


class MarkdownChunkStrategy(ChunkingStrategy):
   """Strategy for heading-aware chunking, even for single-heading documents."""

   name = "markdown"

   def create_chunks(self, text: str) -> List[Chunk]:
       return chunk_markdown(text, self.config.markdown_max_size)


class SmartChunkStrategy(ChunkingStrategy):
   """Strategy picking markdown or plain chunking per document."""

   name = "smart"

   def create_chunks(self, text: str) -> List[Chunk]:
       return smart_chunk(
           text,
           markdown_max_size=self.config.markdown_max_size,
           plain_max_size=self.config.plain_max_size
       )


STRATEGIES: Dict[str, Type[ChunkingStrategy]] = {
   cls.name: cls for cls in (PlainChunkStrategy, MarkdownChunkStrategy, SmartChunkStrategy)
}


def get_strategy(name: str, config: Config) -> ChunkingStrategy:
   """Create the strategy registered under the given name."""
   try:
       strategy_cls = STRATEGIES[name.lower()]
   except KeyError:
       raise ValueError(
           f"Unknown chunking strategy: {name} (expected one of {', '.join(sorted(STRATEGIES))})"
       ) from None
   return strategy_cls(config)
