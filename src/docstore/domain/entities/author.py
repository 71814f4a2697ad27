"""Author entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """Document author, embedded by value."""

    id: str
    name: str
