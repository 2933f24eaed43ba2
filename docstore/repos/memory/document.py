"""
Memory implementation of DocumentRepository.

Documents are kept in a dictionary keyed by document_id. Nothing is
persisted and no locking is done: the repository is meant for a single
thread in a single process.
"""

import logging
import uuid
from typing import Dict, List, Optional

from docstore.domain import Document, SearchRequest
from docstore.repositories import DocumentRepository

logger = logging.getLogger(__name__)


class MemoryDocumentRepository(DocumentRepository):
    """
    Memory implementation of DocumentRepository using a Python dictionary.

    Search results come back in dictionary iteration order. That order is
    an accident of the implementation and callers must not rely on it.
    """

    def __init__(self) -> None:
        """Initialize repository with empty in-memory storage."""
        logger.debug("Initializing MemoryDocumentRepository")

        self._documents: Dict[str, Document] = {}

    def save(self, document: Document) -> Document:
        """Insert or replace a document, generating an id when missing.

        Args:
            document: Document to store

        Returns:
            The stored document with document_id populated

        Raises:
            ValueError: If document is not a Document
        """
        if not isinstance(document, Document):
            raise ValueError(
                "MemoryDocumentRepository.save expects a Document, got "
                f"{type(document).__name__}"
            )

        document_id = document.document_id
        if not document_id:
            document_id = self.generate_id()
            document = document.model_copy(
                update={"document_id": document_id}
            )

        replaced = document_id in self._documents
        self._documents[document_id] = document

        logger.info(
            "MemoryDocumentRepository: Document saved successfully",
            extra={
                "document_id": document.document_id,
                "title": document.title,
                "author_id": document.author.author_id,
                "replaced": replaced,
            },
        )

        return document

    def search(self, request: SearchRequest) -> List[Document]:
        """Return every stored document matching all request criteria.

        Raises:
            ValueError: If request is not a SearchRequest
        """
        if not isinstance(request, SearchRequest):
            raise ValueError(
                "MemoryDocumentRepository.search expects a SearchRequest, "
                f"got {type(request).__name__}"
            )

        matches = [
            document
            for document in self._documents.values()
            if request.matches(document)
        ]

        logger.info(
            "MemoryDocumentRepository: Search completed",
            extra={
                "title_prefixes": request.title_prefixes,
                "contains_contents": request.contains_contents,
                "author_ids": request.author_ids,
                "created_from": (
                    request.created_from.isoformat()
                    if request.created_from
                    else None
                ),
                "created_to": (
                    request.created_to.isoformat()
                    if request.created_to
                    else None
                ),
                "stored_count": len(self._documents),
                "match_count": len(matches),
            },
        )

        return matches

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Retrieve a document by ID.

        Args:
            document_id: Unique document identifier

        Returns:
            Document if found, None otherwise
        """
        document = self._documents.get(document_id)
        if document is None:
            logger.debug(
                "MemoryDocumentRepository: Document not found",
                extra={"document_id": document_id},
            )
            return None

        logger.debug(
            "MemoryDocumentRepository: Document retrieved",
            extra={"document_id": document_id, "title": document.title},
        )
        return document

    def generate_id(self) -> str:
        """Generate a unique document identifier."""
        document_id = str(uuid.uuid4())

        logger.debug(
            "MemoryDocumentRepository: Generated document ID",
            extra={"document_id": document_id},
        )

        return document_id
