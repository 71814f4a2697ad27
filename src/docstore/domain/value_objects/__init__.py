"""Domain value objects."""

from docstore.domain.value_objects.search_request import SearchRequest

__all__ = [
    "SearchRequest",
]
