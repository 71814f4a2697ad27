"""Save document use case."""

from docstore.application.ports import DocumentRepository
from docstore.domain.entities import Document


class SaveDocumentUseCase:
    """Insert a new document or replace an existing one."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._documents = document_repository

    def execute(self, document: Document) -> Document:
        """Save document, returning the stored value with its id."""
        return self._documents.save(document)
