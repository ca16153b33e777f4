"""
Data models for chunking module.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Chunk:
    """Represents one bounded piece of a document, ready for embedding."""
    text: str
    section: Optional[str] = None
    page: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict, leaving out unset location fields."""
        data: Dict[str, Any] = {'text': self.text}
        if self.section is not None:
            data['section'] = self.section
        if self.page is not None:
            data['page'] = self.page
        return data
