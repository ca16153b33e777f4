"""
Source-bound chunk records handed to the embedding and vector-store step.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from .models import Chunk


def make_vector_id(source_id: str, index: int) -> str:
    """Build the vector id for the chunk at ``index`` of a source."""
    return f"{source_id}-chunk-{index}"


@dataclass
class ChunkRecord:
    """A chunk together with the source it came from."""
    id: str
    source_id: str
    source_title: str
    chunk_index: int
    text: str
    section: Optional[str] = None
    page: Optional[int] = None

    def metadata(self) -> Dict[str, Any]:
        """Metadata stored next to the chunk's vector."""
        data: Dict[str, Any] = {
            'text': self.text,
            'sourceId': self.source_id,
            'sourceTitle': self.source_title,
        }
        # Optional fields are only stored when present
        if self.page is not None:
            data['page'] = self.page
        if self.section is not None:
            data['section'] = self.section
        return data

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChunkRecord":
        return cls(
            id=data['id'],
            source_id=data['source_id'],
            source_title=data['source_title'],
            chunk_index=data['chunk_index'],
            text=data['text'],
            section=data.get('section'),
            page=data.get('page')
        )


def build_records(chunks: List[Chunk], source_id: str,
                  source_title: Optional[str] = None) -> List[ChunkRecord]:
    """Attach source metadata and vector ids to a document's chunks."""
    title = source_title or source_id
    return [
        ChunkRecord(
            id=make_vector_id(source_id, index),
            source_id=source_id,
            source_title=title,
            chunk_index=index,
            text=chunk.text,
            section=chunk.section,
            page=chunk.page
        )
        for index, chunk in enumerate(chunks)
    ]
