"""Search request value object."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SearchRequest:
    """Optional search criteria. None or empty means no constraint."""

    title_prefixes: Sequence[str] | None = None
    contains_contents: Sequence[str] | None = None
    author_ids: Sequence[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    def is_empty(self) -> bool:
        """True when no dimension constrains the search."""
        return (
            not self.title_prefixes
            and not self.contains_contents
            and not self.author_ids
            and self.created_from is None
            and self.created_to is None
        )
