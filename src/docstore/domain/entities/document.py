"""Document entity."""

from dataclasses import dataclass
from datetime import datetime

from docstore.domain.entities.author import Author


@dataclass(frozen=True)
class Document:
    """Document keyed by id; id and created are owned by the store."""

    title: str
    content: str
    author: Author
    created: datetime | None = None
    id: str | None = None
