#!/usr/bin/env python3
"""
CLI for the Document Store Demo (Sample Data)

This script demonstrates the document store end to end:
1. Seeds an in-memory repository with sample documents
2. Either looks up a single document by id, or
3. Runs a search built from the command line options and prints the hits

Run with ``LOG_LEVEL=DEBUG`` to see the repository's structured logging.
"""

import logging
import os
import sys
from datetime import datetime, timezone, timedelta
from typing import List, Optional, Tuple

import click

from docstore.domain import Author, Document, SearchRequest
from docstore.repos.memory import MemoryDocumentRepository
from docstore.repositories import DocumentRepository

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure logging based on environment variables"""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    log_format = os.environ.get(
        "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        click.echo(
            f"Invalid log level: {log_level}, defaulting to INFO", err=True
        )
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        stream=sys.stderr,
        force=True,
    )

    logger.debug(
        "Logging configured",
        extra={"log_level": log_level, "numeric_level": numeric_level},
    )


def create_sample_documents() -> List[Document]:
    """Create a small set of sample documents without identifiers."""
    base_time = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    alice = Author(author_id="a1", name="Alice Smith")
    bob = Author(author_id="a2", name="Bob Jones")
    carol = Author(author_id="a3", name="Carol White")

    return [
        Document(
            title="Hello World",
            content="A first document about nothing in particular",
            author=alice,
            created=base_time,
        ),
        Document(
            title="Help Wanted",
            content="Looking for reviewers for the quarterly report",
            author=bob,
            created=base_time + timedelta(days=1),
        ),
        Document(
            title="Quarterly Report",
            content="Revenue grew and the report is ready for review",
            author=alice,
            created=base_time + timedelta(days=7),
        ),
        Document(
            title="Meeting Notes",
            content="Discussed the roadmap and hiring plan",
            author=carol,
            created=base_time + timedelta(days=14),
        ),
    ]


def seed_repository(repo: DocumentRepository) -> List[Document]:
    """Save the sample documents and return them with their ids."""
    return [repo.save(document) for document in create_sample_documents()]


def _parse_timestamp(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[datetime]:
    """Parse an ISO-8601 option value."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not an ISO-8601 timestamp")


def _format_document(document: Document) -> str:
    return (
        f"{document.document_id}  {document.title}  "
        f"({document.author.name})"
    )


@click.command()
@click.option(
    "--title-prefix",
    "title_prefixes",
    multiple=True,
    help="Match titles starting with this prefix (repeatable).",
)
@click.option(
    "--contains",
    "contains_contents",
    multiple=True,
    help="Match content containing this text (repeatable).",
)
@click.option(
    "--author-id",
    "author_ids",
    multiple=True,
    help="Match documents by this author id (repeatable).",
)
@click.option(
    "--created-from",
    callback=_parse_timestamp,
    help="Inclusive lower bound on creation time (ISO-8601).",
)
@click.option(
    "--created-to",
    callback=_parse_timestamp,
    help="Inclusive upper bound on creation time (ISO-8601).",
)
@click.option(
    "--find",
    "find_id",
    default=None,
    help="Look up a single document by id instead of searching.",
)
def main(
    title_prefixes: Tuple[str, ...],
    contains_contents: Tuple[str, ...],
    author_ids: Tuple[str, ...],
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    find_id: Optional[str],
) -> None:
    """Search a document store seeded with sample data."""
    setup_logging()

    repo = MemoryDocumentRepository()
    seeded = seed_repository(repo)
    logger.debug("Seeded sample documents", extra={"count": len(seeded)})

    if find_id is not None:
        document = repo.find_by_id(find_id)
        if document is None:
            click.echo(f"Document {find_id} not found")
            sys.exit(1)
        click.echo(_format_document(document))
        click.echo(f"   Created: {document.created.isoformat()}")
        click.echo(f"   Content: {document.content}")
        return

    request = SearchRequest(
        title_prefixes=list(title_prefixes),
        contains_contents=list(contains_contents),
        author_ids=list(author_ids),
        created_from=created_from,
        created_to=created_to,
    )
    results = repo.search(request)

    for document in results:
        click.echo(_format_document(document))
    click.echo(f"{len(results)} of {len(seeded)} documents matched")


if __name__ == "__main__":
    main()
