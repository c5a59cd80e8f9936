"""In-place manuscript revision built on MutableResult.

Where the publishing pipeline turns each stage's payload into a new type,
revision keeps one ManuscriptDraft and edits it step by step.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from src.core.mutable_result import Cell, MutableResult
from src.publishing.config import PublishingConfig
from src.publishing.manuscript import ManuscriptDraft
from src.publishing.stages import fetch_manuscript

log = logging.getLogger(__name__)


def open_draft(
    manuscript_id: int, config: Optional[PublishingConfig] = None
) -> MutableResult[ManuscriptDraft, str]:
    """Fetch a manuscript and wrap it as an editable draft."""
    fetched = fetch_manuscript(manuscript_id, config)
    if fetched.is_failure():
        return MutableResult.failure(fetched.error)
    return MutableResult.success(ManuscriptDraft.from_manuscript(fetched.value))


def revise_manuscript(
    manuscript_id: int,
    notes: Sequence[str],
    config: Optional[PublishingConfig] = None,
) -> MutableResult[ManuscriptDraft, str]:
    """Apply one revision round per note to a fetched manuscript."""

    def add_note(note: str):
        def apply(cell: Cell[ManuscriptDraft]) -> None:
            draft = cell.contents
            draft.editorial_notes.append(note)
            draft.content += f"\nRevised: {note}"
            draft.revision += 1

        return apply

    draft = open_draft(manuscript_id, config)
    for note in notes:
        draft.in_place_bind(add_note(note))
    return draft.read_only_bind(
        lambda d: log.info("Manuscript %d at revision %d", d.id, d.revision)
    )


def format_revision_report(draft: MutableResult[ManuscriptDraft, str]) -> str:
    if draft.is_failure():
        return f"Error in revision: {draft.error}"

    current = draft.value
    lines = [
        "Revision complete!",
        f"Title: {current.title}",
        f"Revision: {current.revision}",
    ]
    lines.extend(f"  - {note}" for note in current.editorial_notes)
    return "\n".join(lines)
