"""Application ports - interfaces for external adapters."""

from docstore.application.ports.repositories import DocumentRepository

__all__ = [
    "DocumentRepository",
]
