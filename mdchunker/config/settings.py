"""
Configuration management for mdchunker.
"""

import os
from pathlib import Path
from typing import List, Optional


def _positive_int(name: str, default: str) -> int:
   """Read a positive integer setting from the environment."""
   value = int(os.getenv(name, default))
   if value <= 0:
       raise ValueError(f"{name} must be a positive integer, got {value}")
   return value


class Config:
   """Configuration settings for mdchunker."""

   def __init__(self, data_dir: Optional[str] = None):
       """Initialize configuration with optional data directory."""
       # Base directories
       self.project_root = Path(__file__).parent.parent.parent
       env_data_dir = os.getenv("MDCHUNK_DATA_DIR")
       if data_dir:
           self.data_dir = Path(data_dir)
       elif env_data_dir:
           self.data_dir = Path(env_data_dir)
       else:
           self.data_dir = self.project_root / "data"

       self.raw_data_dir = self.data_dir / "raw"
       self.chunks_dir = self.data_dir / "chunks"

       # Create directories
       for dir_path in [self.raw_data_dir, self.chunks_dir]:
           dir_path.mkdir(parents=True, exist_ok=True)

       # Chunking settings
       self.markdown_max_size = _positive_int("MDCHUNK_MARKDOWN_MAX_SIZE", "1500")
       self.plain_max_size = _positive_int("MDCHUNK_PLAIN_MAX_SIZE", "1000")
       self.chunk_strategy = os.getenv("MDCHUNK_STRATEGY", "smart").lower()

       # Input files
       patterns = os.getenv("MDCHUNK_FILE_PATTERNS", "*.md,*.markdown,*.txt")
       self.file_patterns: List[str] = [p.strip() for p in patterns.split(",") if p.strip()]

       # File paths
       self.chunks_file = self.chunks_dir / "chunks.json"

       # Logging
       self.log_level = os.getenv("MDCHUNK_LOG_LEVEL", "INFO")
       self.log_file = self.data_dir / "mdchunker.log"

   def __repr__(self):
       """String representation of config."""
       return f"Config(data_dir={self.data_dir}, chunk_strategy={self.chunk_strategy})"
