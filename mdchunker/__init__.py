"""
mdchunker - Structure-preserving document chunking for RAG ingestion

Splits markdown and plain text into bounded-size chunks that follow the
document's heading hierarchy, numbered verse groupings and paragraphs.
"""

__version__ = "0.1.0"

from .config.settings import Config
from .chunking import Chunk, ChunkRecord, DocumentChunker, chunk_text, chunk_markdown, smart_chunk


class MDChunker:
   """Main mdchunker interface for document ingestion."""

   def __init__(self, data_dir=None, config=None, strategy=None):
       """Initialize with optional data directory, config and strategy name."""
       self.config = config or Config(data_dir=data_dir)
       self.strategy = strategy
       self.chunker = None

   def get_chunker(self):
       """Get or create chunker instance."""
       if self.chunker is None:
           self.chunker = DocumentChunker(self.config, strategy=self.strategy)
       return self.chunker

   def chunk_file(self, path, source_id=None, source_title=None):
       """Chunk a single local file."""
       return self.get_chunker().process_file(path, source_id, source_title)

   def build(self, input_dir=None, output_file=None):
       """Chunk every document in a directory and save the records."""
       chunker = self.get_chunker()
       records = chunker.process_directory(input_dir)
       chunker.save_chunks(output_file)
       return len(records)


__all__ = [
   "MDChunker",
   "Config",
   "Chunk",
   "ChunkRecord",
   "DocumentChunker",
   "chunk_text",
   "chunk_markdown",
   "smart_chunk",
   "__version__",
]
