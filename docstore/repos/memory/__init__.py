"""
Memory repository implementations for the docstore domain.

These implementations use Python dictionaries for storage and keep no
state beyond the lifetime of the repository instance.
"""

from .document import MemoryDocumentRepository

__all__ = [
    "MemoryDocumentRepository",
]
