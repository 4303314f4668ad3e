"""Event document storage for EventAgenda."""

from eventagenda.storage.documents import (
    EventDocument,
    iter_documents,
    list_document_paths,
    read_document,
)

__all__ = [
    "EventDocument",
    "iter_documents",
    "list_document_paths",
    "read_document",
]
