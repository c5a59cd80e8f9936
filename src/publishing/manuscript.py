"""Manuscript models for the publishing pipeline.

One frozen payload type per stage: each step consumes the previous stage's
type and produces the next one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Manuscript:
    """A manuscript as submitted."""

    id: int
    title: str
    content: str
    author: str
    submission_date: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class EditedManuscript:
    """A manuscript after editorial review."""

    id: int
    title: str
    content: str
    author: str
    editorial_notes: tuple[str, ...] = ()
    edit_date: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class FormattedManuscript:
    """A manuscript laid out to a style guide."""

    id: int
    title: str
    formatted_content: str
    author: str
    format_type: str
    format_date: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class ReviewedManuscript:
    """A manuscript after peer review."""

    id: int
    title: str
    formatted_content: str
    author: str
    approved: bool
    review_comments: tuple[str, ...] = ()
    review_date: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class PublishedManuscript:
    """The final output of the publishing pipeline."""

    id: int
    title: str
    formatted_content: str
    author: str
    isbn: str
    publish_date: datetime = field(default_factory=_now)


@dataclass(slots=True)
class ManuscriptDraft:
    """A working copy edited in place during revision."""

    id: int
    title: str
    content: str
    author: str
    editorial_notes: list[str] = field(default_factory=list)
    revision: int = 0

    @classmethod
    def from_manuscript(cls, manuscript: Manuscript) -> ManuscriptDraft:
        return cls(
            id=manuscript.id,
            title=manuscript.title,
            content=manuscript.content,
            author=manuscript.author,
        )
