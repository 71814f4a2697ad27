"""In-memory document store."""

import logging
import threading
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from uuid import uuid4

from docstore.domain.entities import Author, Document
from docstore.domain.exceptions import ValidationError
from docstore.domain.value_objects import SearchRequest
from docstore.infrastructure.persistence.memory.filters import (
    DOCUMENT_FILTERS,
    DocumentFilter,
    matches_all,
)

logger = logging.getLogger(__name__)


def _validate_document(document: object) -> None:
    """Raise ValidationError unless document is a well-formed Document."""
    if not isinstance(document, Document):
        raise ValidationError(f"Expected Document, got {type(document).__name__}")
    if document.id is not None and not isinstance(document.id, str):
        raise ValidationError("Document id must be a string")
    if not isinstance(document.title, str):
        raise ValidationError("Document title must be a string")
    if not isinstance(document.content, str):
        raise ValidationError("Document content must be a string")
    if not isinstance(document.author, Author) or not isinstance(document.author.id, str):
        raise ValidationError("Document author must be an Author with a string id")
    if document.created is not None and not isinstance(document.created, datetime):
        raise ValidationError("Document created must be a datetime")


def _validate_request(request: object) -> None:
    """Raise ValidationError unless request is a well-formed SearchRequest."""
    if not isinstance(request, SearchRequest):
        raise ValidationError(f"Expected SearchRequest, got {type(request).__name__}")
    for name in ("title_prefixes", "contains_contents", "author_ids"):
        values = getattr(request, name)
        if values is None:
            continue
        # a bare string would be matched character by character
        if isinstance(values, str) or not isinstance(values, Sequence):
            raise ValidationError(f"{name} must be a sequence of strings")
        if not all(isinstance(v, str) for v in values):
            raise ValidationError(f"{name} must be a sequence of strings")
    for name in ("created_from", "created_to"):
        value = getattr(request, name)
        if value is not None and not isinstance(value, datetime):
            raise ValidationError(f"{name} must be a datetime")


class DocumentStore:
    """Thread-safe document repository backed by a dict keyed by id."""

    def __init__(self, filters: tuple[DocumentFilter, ...] = DOCUMENT_FILTERS) -> None:
        self._by_id: dict[str, Document] = {}
        self._lock = threading.Lock()
        self._filters = filters

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)

    def __contains__(self, document_id: object) -> bool:
        with self._lock:
            return document_id in self._by_id

    def save(self, document: Document) -> Document:
        """Upsert document.

        A missing id is generated. When the id is already stored, the stored
        creation time wins over whatever the caller passed.
        """
        _validate_document(document)

        with self._lock:
            if not document.id:
                document = replace(document, id=str(uuid4()))
                logger.debug("Inserting document %s", document.id)
            else:
                existing = self._by_id.get(document.id)
                if existing is not None:
                    document = replace(document, created=existing.created)
                    logger.debug("Updating document %s", document.id)
                else:
                    logger.debug("Inserting document %s with caller id", document.id)
            self._by_id[document.id] = document
        return document

    def find_by_id(self, document_id: str) -> Document | None:
        """Get document by id, or None."""
        with self._lock:
            return self._by_id.get(document_id)

    def search(self, request: SearchRequest) -> list[Document]:
        """Documents matching every non-empty dimension of the request."""
        _validate_request(request)

        with self._lock:
            documents = list(self._by_id.values())
        if request.is_empty():
            return documents

        found = [d for d in documents if matches_all(d, request, self._filters)]
        logger.debug("Search matched %d of %d documents", len(found), len(documents))
        return found
