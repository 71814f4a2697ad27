"""Unit tests for entities and value objects."""

import dataclasses
from datetime import UTC, datetime

import pytest

from docstore.domain.entities import Author, Document
from docstore.domain.value_objects import SearchRequest


def test_document_is_immutable() -> None:
    """Documents can only change through the store."""
    doc = Document(title="t", content="c", author=Author(id="a", name="n"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        doc.title = "other"  # type: ignore[misc]


def test_document_defaults() -> None:
    doc = Document(title="t", content="c", author=Author(id="a", name="n"))
    assert doc.id is None
    assert doc.created is None


def test_documents_equal_by_value() -> None:
    created = datetime(2024, 1, 1, tzinfo=UTC)
    a = Document(id="1", title="t", content="c", author=Author(id="a", name="n"), created=created)
    b = Document(id="1", title="t", content="c", author=Author(id="a", name="n"), created=created)
    assert a == b


def test_search_request_is_empty() -> None:
    assert SearchRequest().is_empty()
    assert SearchRequest(title_prefixes=[], author_ids=()).is_empty()
    assert not SearchRequest(author_ids=["a"]).is_empty()
    assert not SearchRequest(created_to=datetime(2024, 1, 1, tzinfo=UTC)).is_empty()
