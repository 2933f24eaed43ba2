"""
Defines the repository protocol for document storage.

Implementations own every document they store. Callers depend on this
protocol rather than on a concrete store so that the same contract tests
can be run against any implementation.
"""

from typing import List, Optional, Protocol, runtime_checkable

from .domain import Document, SearchRequest


@runtime_checkable
class DocumentRepository(Protocol):
    """
    Protocol for a repository that stores, searches and looks up documents.

    There is no delete, count or partial update operation; ``save`` is the
    only way to change stored state.
    """

    def save(self, document: Document) -> Document:
        """Insert or fully replace a document.

        Args:
            document: Document to store. If ``document_id`` is None or
                empty a new identifier is generated.

        Returns:
            The stored document, carrying its identifier.

        Implementation Notes:
        - Must never modify ``created``
        - Replacing an existing id overwrites the whole document, no merge
        - Must raise ValueError when given something that is not a Document
        """
        ...

    def search(self, request: SearchRequest) -> List[Document]:
        """Return every stored document matching the request.

        The order of the result is not part of the contract. An empty list
        is returned when nothing matches.
        """
        ...

    def find_by_id(self, document_id: str) -> Optional[Document]:
        """Retrieve a document by exact identifier.

        Returns:
            Document if found, None otherwise
        """
        ...

    def generate_id(self) -> str:
        """Generate a unique document identifier.

        Implementation Notes:
        - Must generate globally unique identifiers
        - Must never return an empty string
        """
        ...
