import pytest

from docstore.repos.memory import MemoryDocumentRepository


@pytest.fixture
def repo() -> MemoryDocumentRepository:
    """Provide an empty in-memory document repository."""
    return MemoryDocumentRepository()
