"""Search predicates for the in-memory document store.

Each predicate takes a document and a search request and returns True when
the document satisfies that one dimension. A predicate whose criterion is
empty always passes; the store ANDs them together.
"""

from collections.abc import Callable

from docstore.domain.entities import Document
from docstore.domain.value_objects import SearchRequest

DocumentFilter = Callable[[Document, SearchRequest], bool]


def matches_title_prefix(document: Document, request: SearchRequest) -> bool:
    """Title starts with any of the prefixes, ignoring case."""
    if not request.title_prefixes:
        return True
    title = document.title.casefold()
    return any(title.startswith(prefix.casefold()) for prefix in request.title_prefixes)


def matches_content(document: Document, request: SearchRequest) -> bool:
    """Content contains any of the substrings, ignoring case."""
    if not request.contains_contents:
        return True
    content = document.content.casefold()
    return any(part.casefold() in content for part in request.contains_contents)


def matches_author(document: Document, request: SearchRequest) -> bool:
    """Author id equals one of the requested ids exactly."""
    if not request.author_ids:
        return True
    return document.author.id in request.author_ids


def matches_created_range(document: Document, request: SearchRequest) -> bool:
    """Created lies within [created_from, created_to]; bounds are optional."""
    if request.created_from is None and request.created_to is None:
        return True
    created = document.created
    if created is None:
        return False
    if request.created_from is not None and created < request.created_from:
        return False
    if request.created_to is not None and created > request.created_to:
        return False
    return True


DOCUMENT_FILTERS: tuple[DocumentFilter, ...] = (
    matches_title_prefix,
    matches_content,
    matches_author,
    matches_created_range,
)


def matches_all(
    document: Document,
    request: SearchRequest,
    filters: tuple[DocumentFilter, ...] = DOCUMENT_FILTERS,
) -> bool:
    """True when the document passes every filter."""
    return all(f(document, request) for f in filters)
