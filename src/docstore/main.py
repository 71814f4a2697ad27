"""Application entry point and composition root."""

import logging
from dataclasses import dataclass

from docstore import __version__
from docstore.application.use_cases.document.get_document import GetDocumentUseCase
from docstore.application.use_cases.document.save_document import SaveDocumentUseCase
from docstore.application.use_cases.search.search_documents import SearchDocumentsUseCase
from docstore.config import Settings, get_settings
from docstore.infrastructure.persistence.memory.document_store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass
class DocStoreApp:
    """Wired store and use cases."""

    store: DocumentStore
    save_document: SaveDocumentUseCase
    get_document: GetDocumentUseCase
    search_documents: SearchDocumentsUseCase


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)


def create_document_store() -> DocStoreApp:
    """Composition root - build a fresh store with its use cases."""
    store = DocumentStore()
    return DocStoreApp(
        store=store,
        save_document=SaveDocumentUseCase(store),
        get_document=GetDocumentUseCase(store),
        search_documents=SearchDocumentsUseCase(store),
    )


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings)
    app = create_document_store()
    logger.info(
        "docstore %s ready (environment=%s, documents=%d)",
        __version__,
        settings.environment,
        len(app.store),
    )
    print(f"docstore v{__version__}")
