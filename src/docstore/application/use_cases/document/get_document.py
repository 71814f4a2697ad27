"""Get document use case."""

import logging

from docstore.application.ports import DocumentRepository
from docstore.domain.entities import Document

logger = logging.getLogger(__name__)


class GetDocumentUseCase:
    """Get document by id."""

    def __init__(self, document_repository: DocumentRepository) -> None:
        self._documents = document_repository

    def execute(self, document_id: str) -> Document | None:
        """Return the document, or None when the id is unknown."""
        document = self._documents.find_by_id(document_id)
        if document is None:
            logger.debug("Document %s not found", document_id)
        return document
