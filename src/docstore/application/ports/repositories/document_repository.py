"""Document repository port."""

from typing import Protocol

from docstore.domain.entities import Document
from docstore.domain.value_objects import SearchRequest


class DocumentRepository(Protocol):
    """Port for document storage and search."""

    def save(self, document: Document) -> Document: ...

    def find_by_id(self, document_id: str) -> Document | None: ...

    def search(self, request: SearchRequest) -> list[Document]: ...
