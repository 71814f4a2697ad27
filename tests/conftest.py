"""Pytest fixtures for docstore tests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from docstore.domain.entities import Author, Document
from docstore.infrastructure.persistence.memory.document_store import DocumentStore

DOCUMENT_TITLE = "Test document title"
DOCUMENT_CONTENT = "Test document content"


@dataclass
class StoreFixture:
    """Store seeded with the three canonical documents."""

    store: DocumentStore
    author: Author
    created: datetime
    document_id: str
    title: str = DOCUMENT_TITLE
    content: str = DOCUMENT_CONTENT


@pytest.fixture
def author() -> Author:
    """Author shared by all fixture documents."""
    return Author(id=str(uuid4()), name="Test name")


@pytest.fixture
def created() -> datetime:
    """Creation time of the first fixture document."""
    return datetime.now(UTC)


@pytest.fixture
def store() -> DocumentStore:
    """Empty document store."""
    return DocumentStore()


@pytest.fixture
def seeded(store: DocumentStore, author: Author, created: datetime) -> StoreFixture:
    """Store holding documents created at T, T+10s and T+15s."""
    document_id = str(uuid4())
    store.save(
        Document(
            id=document_id,
            title=DOCUMENT_TITLE,
            content=DOCUMENT_CONTENT,
            author=author,
            created=created,
        )
    )
    store.save(
        Document(
            id=str(uuid4()),
            title="blah " + DOCUMENT_TITLE,
            content=DOCUMENT_CONTENT + " blah",
            author=author,
            created=created + timedelta(seconds=10),
        )
    )
    store.save(
        Document(
            id=str(uuid4()),
            title="blah" + DOCUMENT_TITLE,
            content="blah" + DOCUMENT_CONTENT,
            author=author,
            created=created + timedelta(seconds=15),
        )
    )
    return StoreFixture(store=store, author=author, created=created, document_id=document_id)
