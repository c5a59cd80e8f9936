"""Publishing pipeline chaining the manuscript stages.

The pipeline:
1. Fetches a manuscript by ID
2. Edits, formats and reviews it
3. Publishes it with an assigned ISBN

Stages are composed with ``bind``, so the first failing stage ends the run
and its error message is what the caller receives.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Optional, Sequence

from src.core.result import Result, chain
from src.publishing.config import PublishingConfig
from src.publishing.manuscript import PublishedManuscript
from src.publishing.stages import (
    edit_manuscript,
    fetch_manuscript,
    format_manuscript,
    parse_manuscript_id,
    publish_manuscript,
    review_manuscript,
)

log = logging.getLogger(__name__)

Step = Callable[[object], Result]


def default_stages(config: PublishingConfig) -> list[tuple[str, Step]]:
    """Stages run after fetch, in order."""
    return [
        ("edit", edit_manuscript),
        ("format", partial(format_manuscript, config=config)),
        ("review", partial(review_manuscript, config=config)),
        ("publish", partial(publish_manuscript, config=config)),
    ]


class PublishingPipeline:
    """Manuscript publishing pipeline with pluggable stages.

    Usage:
        pipeline = PublishingPipeline(PublishingConfig())
        result = pipeline.publish(42)
        print(format_report(result))
    """

    def __init__(
        self,
        config: Optional[PublishingConfig] = None,
        stages: Optional[Sequence[tuple[str, Step]]] = None,
    ) -> None:
        self._config = config or PublishingConfig()
        self._stages = list(stages) if stages is not None else default_stages(self._config)

    @property
    def stage_names(self) -> list[str]:
        return ["fetch"] + [name for name, _ in self._stages]

    def publish(self, manuscript_id: int) -> Result[PublishedManuscript, str]:
        """Run every stage for one manuscript.

        Returns:
            Result with the published manuscript, or the first stage error.
        """
        fetched = self._logged("fetch", partial(fetch_manuscript, config=self._config))(
            manuscript_id
        )
        result = chain(fetched, *(self._logged(name, step) for name, step in self._stages))
        if result.is_failure():
            log.warning("Publishing manuscript %s failed: %s", manuscript_id, result.error)
        return result

    def publish_raw(self, raw_id: str) -> Result[PublishedManuscript, str]:
        """Parse console input, then publish."""
        return parse_manuscript_id(raw_id).bind(self.publish)

    @staticmethod
    def _logged(name: str, step: Step) -> Step:
        def run(payload: object) -> Result:
            result = step(payload)
            if result.is_success():
                log.debug("Stage %s succeeded", name)
            else:
                log.debug("Stage %s failed: %s", name, result.error)
            return result

        return run


def format_report(result: Result[PublishedManuscript, str]) -> str:
    """Render the outcome of a pipeline run for the console."""
    if result.is_failure():
        return f"Error in publishing pipeline: {result.error}"

    published = result.value
    return "\n".join(
        [
            "Successfully published!",
            f"Title: {published.title}",
            f"Author: {published.author}",
            f"ISBN: {published.isbn}",
            f"Publish Date: {published.publish_date.ctime()}",
        ]
    )
