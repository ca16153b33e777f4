"""
Document chunker for mdchunker.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np
from tqdm import tqdm

from ..config.settings import Config
from ..utils.helpers import sanitize_filename
from ..utils.logging import get_logger, log_performance
from .records import ChunkRecord, build_records
from .strategies import get_strategy


class EmptyDocumentError(ValueError):
    """Raised when a document produces no chunks."""


class DocumentChunker:
    """Chunks documents and collects source-bound chunk records."""

    def __init__(self, config: Config, strategy: Optional[str] = None):
        """Initialize document chunker with configuration."""
        self.config = config
        self.logger = get_logger(__name__)
        self.records: List[ChunkRecord] = []
        self.strategy = get_strategy(strategy or config.chunk_strategy, config)

    def chunk_document(self, text: str, source_id: str,
                       source_title: Optional[str] = None) -> List[ChunkRecord]:
        """Chunk a single document's text and keep its records."""
        chunks = self.strategy.create_chunks(text)
        if not chunks:
            raise EmptyDocumentError(
                f"No chunks generated for {source_id}. Text may be empty or improperly formatted."
            )

        records = build_records(chunks, source_id, source_title)
        self.records.extend(records)
        self.logger.debug(f"Created {len(records)} chunks for {source_id}")
        return records

    def process_file(self, path: Union[str, Path], source_id: Optional[str] = None,
                     source_title: Optional[str] = None) -> List[ChunkRecord]:
        """Read a local text or markdown file and chunk it."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        text = path.read_text(encoding='utf-8')
        self.logger.debug(f"Read {len(text)} characters from {path.name}")

        return self.chunk_document(
            text,
            source_id or sanitize_filename(path.stem),
            source_title or path.stem
        )

    def _find_files(self, input_dir: Path) -> List[Path]:
        """Collect files matching the configured patterns."""
        files = set()
        for pattern in self.config.file_patterns:
            files.update(p for p in input_dir.glob(pattern) if p.is_file())
        return sorted(files)

    @log_performance
    def process_directory(self, input_dir: Optional[Union[str, Path]] = None) -> List[ChunkRecord]:
        """Process all matching files in a directory."""
        if input_dir is None:
            input_dir = self.config.raw_data_dir
        else:
            input_dir = Path(input_dir)

        if not input_dir.exists():
            raise FileNotFoundError(f"Directory not found: {input_dir}")

        files = self._find_files(input_dir)
        if not files:
            raise FileNotFoundError(
                f"No files matching {', '.join(self.config.file_patterns)} found in: {input_dir}"
            )

        self.logger.info(f"Processing {len(files)} files with the {self.strategy.name} strategy...")

        self.records = []
        for path in tqdm(files, desc="Chunking documents"):
            try:
                self.process_file(path)
            except (OSError, UnicodeDecodeError, EmptyDocumentError) as e:
                self.logger.error(f"Error processing {path}: {e}")
                continue

        self.logger.info(f"Created {len(self.records)} total chunks")
        return self.records

    def save_chunks(self, output_file: Optional[Union[str, Path]] = None) -> Path:
        """Save chunk records to a JSON file."""
        if output_file is None:
            output_file = self.config.chunks_file
        else:
            output_file = Path(output_file)

        output_file.parent.mkdir(parents=True, exist_ok=True)

        chunks_data = [record.to_dict() for record in self.records]
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(chunks_data, f, indent=2, ensure_ascii=False)

        self.logger.info(f"Saved {len(chunks_data)} chunks to {output_file}")
        return output_file

    def load_chunks(self, input_file: Optional[Union[str, Path]] = None) -> List[ChunkRecord]:
        """Load chunk records from a JSON file."""
        if input_file is None:
            input_file = self.config.chunks_file
        else:
            input_file = Path(input_file)

        if not input_file.exists():
            raise FileNotFoundError(f"Chunks file not found: {input_file}")

        with open(input_file, 'r', encoding='utf-8') as f:
            chunks_data = json.load(f)

        self.records = [ChunkRecord.from_dict(data) for data in chunks_data]

        self.logger.info(f"Loaded {len(self.records)} chunks from {input_file}")
        return self.records

    def get_stats(self) -> Dict[str, Any]:
        """Get chunking statistics."""
        lengths = np.array([len(r.text) for r in self.records], dtype=np.int64)
        sectioned = sum(1 for r in self.records if r.section is not None)

        stats: Dict[str, Any] = {
            'total': len(self.records),
            'sources': len({r.source_id for r in self.records}),
            'sectioned': sectioned,
            'plain': len(self.records) - sectioned,
            'mean_length': 0.0,
            'median_length': 0.0,
            'p95_length': 0.0,
            'max_length': 0
        }
        if lengths.size:
            stats.update({
                'mean_length': float(lengths.mean()),
                'median_length': float(np.median(lengths)),
                'p95_length': float(np.percentile(lengths, 95)),
                'max_length': int(lengths.max())
            })
        return stats

    def print_stats(self) -> None:
        """Print chunking statistics."""
        stats = self.get_stats()

        self.logger.info("Chunking Statistics:")
        self.logger.info(f"  Sources:          {stats['sources']}")
        self.logger.info(f"  Total chunks:     {stats['total']}")
        self.logger.info(f"  With section:     {stats['sectioned']}")
        self.logger.info(f"  Without section:  {stats['plain']}")
        self.logger.info(f"  Mean length:      {stats['mean_length']:.1f}")
        self.logger.info(f"  Median length:    {stats['median_length']:.1f}")
        self.logger.info(f"  95th percentile:  {stats['p95_length']:.1f}")
        self.logger.info(f"  Max length:       {stats['max_length']}")
