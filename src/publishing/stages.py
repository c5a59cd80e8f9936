"""Step functions for the publishing pipeline.

Each stage takes one payload and returns Result[NextPayload, str]. Expected
problems are reported as Failure values; nothing here raises.

The stages are mocks with fixed data and hardcoded approvals. They exist to
show how typed steps compose with ``bind``, not to model a real workflow.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from src.core.result import Failure, Result, Success
from src.publishing.config import PublishingConfig
from src.publishing.manuscript import (
    EditedManuscript,
    FormattedManuscript,
    Manuscript,
    PublishedManuscript,
    ReviewedManuscript,
)

log = logging.getLogger(__name__)

EDITORIAL_NOTES = ("Fixed grammar", "Improved structure")
REVIEW_COMMENTS = ("Excellent work", "Ready for publication")

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_manuscript_id(raw: str) -> Result[int, str]:
    """Read a manuscript ID from the start of console input.

    Leading whitespace is skipped and the longest integer prefix is taken;
    anything after it is ignored (``"42 abc"`` reads 42, ``"4_2"`` reads 4).
    """
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        log.debug("Unparseable manuscript ID: %r", raw)
        return Failure("Invalid manuscript ID")
    return Success(int(match.group(1)))


def fetch_manuscript(
    manuscript_id: int, config: Optional[PublishingConfig] = None
) -> Result[Manuscript, str]:
    if manuscript_id <= 0:
        return Failure("Invalid manuscript ID")

    config = config or PublishingConfig()
    log.debug("Fetched manuscript %d", manuscript_id)
    return Success(
        Manuscript(
            id=manuscript_id,
            title=config.default_title,
            content=config.default_content,
            author=config.default_author,
        )
    )


def edit_manuscript(manuscript: Manuscript) -> Result[EditedManuscript, str]:
    if not manuscript.content:
        return Failure("Empty manuscript content")

    return Success(
        EditedManuscript(
            id=manuscript.id,
            title=manuscript.title,
            content=manuscript.content + "\nEdited content...",
            author=manuscript.author,
            editorial_notes=EDITORIAL_NOTES,
        )
    )


def format_manuscript(
    edited: EditedManuscript, config: Optional[PublishingConfig] = None
) -> Result[FormattedManuscript, str]:
    if not edited.editorial_notes:
        return Failure("No editorial notes found")

    config = config or PublishingConfig()
    return Success(
        FormattedManuscript(
            id=edited.id,
            title=edited.title,
            formatted_content=edited.content + "\nFormatted according to style guide...",
            author=edited.author,
            format_type=config.format_type,
        )
    )


def review_manuscript(
    formatted: FormattedManuscript, config: Optional[PublishingConfig] = None
) -> Result[ReviewedManuscript, str]:
    config = config or PublishingConfig()
    if formatted.format_type != config.required_format:
        return Failure("Invalid format type")

    return Success(
        ReviewedManuscript(
            id=formatted.id,
            title=formatted.title,
            formatted_content=formatted.formatted_content,
            author=formatted.author,
            approved=True,
            review_comments=REVIEW_COMMENTS,
        )
    )


def publish_manuscript(
    reviewed: ReviewedManuscript, config: Optional[PublishingConfig] = None
) -> Result[PublishedManuscript, str]:
    if not reviewed.approved:
        return Failure("Manuscript not approved")

    config = config or PublishingConfig()
    isbn = f"ISBN-{reviewed.id}-{config.isbn_year}"
    log.info("Published manuscript %d as %s", reviewed.id, isbn)
    return Success(
        PublishedManuscript(
            id=reviewed.id,
            title=reviewed.title,
            formatted_content=reviewed.formatted_content,
            author=reviewed.author,
            isbn=isbn,
        )
    )
