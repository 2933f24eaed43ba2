"""
Document domain models for the in-memory document store.

These models represent stored documents, their embedded authors and the
filter specification used to search them. All models are frozen Pydantic
v2 models; the store never mutates a document in place.
"""

import logging
import zoneinfo
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def _ensure_timezone_aware(v: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so every instant is comparable."""
    if v is not None and v.tzinfo is None:
        logger.warning(f"Converting naive datetime {v} to UTC")
        return v.replace(tzinfo=zoneinfo.ZoneInfo("UTC"))
    return v


class Author(BaseModel):
    """Author embedded in a document. Authors are not stored separately."""

    model_config = ConfigDict(frozen=True)

    author_id: str = Field(..., description="Identifier of the author")
    name: str = Field(..., description="Display name of the author")


class Document(BaseModel):
    """A stored record with title, content, author and creation time.

    ``document_id`` may be missing or empty before the first save; the
    repository assigns one. ``created`` is owned by the caller and is never
    changed by the repository.
    """

    model_config = ConfigDict(frozen=True)

    document_id: Optional[str] = Field(
        None, description="Unique identifier, assigned on save if missing"
    )
    title: str = Field(..., description="Document title")
    content: str = Field(..., description="Document body")
    author: Author = Field(..., description="Embedded author value")
    created: datetime = Field(
        ..., description="Creation time supplied by the caller"
    )

    @field_validator("created")
    @classmethod
    def ensure_timezone_aware(cls, v: datetime) -> datetime:
        return _ensure_timezone_aware(v)

    @property
    def has_id(self) -> bool:
        """Whether the document already carries a usable identifier."""
        return bool(self.document_id)


class SearchRequest(BaseModel):
    """Filter specification for searching documents.

    Each dimension is optional. An empty list or a missing bound places no
    constraint on that dimension. Within a list any entry may match; across
    dimensions every constraint must hold. Both date bounds are inclusive.
    """

    model_config = ConfigDict(frozen=True)

    title_prefixes: List[str] = Field(
        default_factory=list,
        description="Title must start with at least one of these",
    )
    contains_contents: List[str] = Field(
        default_factory=list,
        description="Content must contain at least one of these",
    )
    author_ids: List[str] = Field(
        default_factory=list,
        description="Author id must be one of these",
    )
    created_from: Optional[datetime] = Field(
        None, description="Inclusive lower bound on created"
    )
    created_to: Optional[datetime] = Field(
        None, description="Inclusive upper bound on created"
    )

    @field_validator(
        "title_prefixes", "contains_contents", "author_ids", mode="before"
    )
    @classmethod
    def none_means_no_constraint(cls, v: Any) -> Any:
        if v is None:
            return []
        return v

    @field_validator("created_from", "created_to")
    @classmethod
    def ensure_timezone_aware(
        cls, v: Optional[datetime]
    ) -> Optional[datetime]:
        return _ensure_timezone_aware(v)

    @property
    def is_empty(self) -> bool:
        """True when the request places no constraint at all."""
        return not (
            self.title_prefixes
            or self.contains_contents
            or self.author_ids
            or self.created_from is not None
            or self.created_to is not None
        )

    def title_matches(self, document: Document) -> bool:
        if not self.title_prefixes:
            return True
        return any(
            document.title.startswith(prefix)
            for prefix in self.title_prefixes
        )

    def content_matches(self, document: Document) -> bool:
        if not self.contains_contents:
            return True
        return any(
            fragment in document.content
            for fragment in self.contains_contents
        )

    def author_matches(self, document: Document) -> bool:
        if not self.author_ids:
            return True
        return document.author.author_id in self.author_ids

    def created_matches(self, document: Document) -> bool:
        if (
            self.created_from is not None
            and document.created < self.created_from
        ):
            return False
        if self.created_to is not None and document.created > self.created_to:
            return False
        return True

    def matches(self, document: Document) -> bool:
        """Return True if the document satisfies every dimension."""
        return (
            self.title_matches(document)
            and self.content_matches(document)
            and self.author_matches(document)
            and self.created_matches(document)
        )
