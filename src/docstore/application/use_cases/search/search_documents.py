"""Search documents use case - title, content, author and creation time."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from docstore.application.ports import DocumentRepository
from docstore.domain.entities import Document
from docstore.domain.value_objects import SearchRequest


@dataclass
class SearchDocumentsInput:
    """Input for document search. Unset fields do not constrain results."""

    title_prefixes: Sequence[str] | None = None
    contains_contents: Sequence[str] | None = None
    author_ids: Sequence[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None


class SearchDocumentsUseCase:
    """Search stored documents; dimensions are ANDed, values within one are ORed."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._documents = document_repository

    def execute(self, input_data: SearchDocumentsInput) -> list[Document]:
        """Execute search."""
        request = SearchRequest(
            title_prefixes=tuple(input_data.title_prefixes or ()),
            contains_contents=tuple(input_data.contains_contents or ()),
            author_ids=tuple(input_data.author_ids or ()),
            created_from=input_data.created_from,
            created_to=input_data.created_to,
        )
        return self._documents.search(request)
