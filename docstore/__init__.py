"""
In-memory document store.

Exports the domain models, the repository protocol and the in-memory
repository implementation.
"""

from .domain import Author, Document, SearchRequest
from .repositories import DocumentRepository
from .repos.memory import MemoryDocumentRepository

__all__ = [
    "Author",
    "Document",
    "SearchRequest",
    "DocumentRepository",
    "MemoryDocumentRepository",
]
