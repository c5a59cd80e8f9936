"""CLI interface for the publishing pipeline.

Provides command-line access to:
- publish: Run a manuscript through every stage and print the report
- revise: Apply in-place revision notes to a manuscript draft
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from src.publishing.config import PublishingConfig
from src.publishing.pipeline import PublishingPipeline, format_report
from src.publishing.revision import format_revision_report, revise_manuscript


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Manuscript Pipeline - publish manuscripts through chained stages"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Publish command
    publish_parser = subparsers.add_parser("publish", help="Publish a manuscript")
    publish_parser.add_argument(
        "manuscript_id", nargs="?", default=None, help="Manuscript ID (prompted if omitted)"
    )

    # Revise command
    revise_parser = subparsers.add_parser("revise", help="Revise a manuscript draft")
    revise_parser.add_argument("manuscript_id", type=int, help="Manuscript ID")
    revise_parser.add_argument(
        "--note", action="append", default=[], help="Revision note (repeatable)"
    )

    args = parser.parse_args()

    config = PublishingConfig()
    configure_logging(config, verbose=args.verbose)

    if args.command == "publish":
        run_publish(args.manuscript_id, config)
    elif args.command == "revise":
        run_revise(args.manuscript_id, args.note, config)
    else:
        parser.print_help()
        sys.exit(1)


def configure_logging(config: PublishingConfig, verbose: bool = False) -> None:
    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_publish(raw_id: Optional[str], config: Optional[PublishingConfig] = None) -> None:
    """Publish one manuscript, reading its ID from stdin when not given."""
    if raw_id is None:
        try:
            raw_id = input("Enter manuscript ID: ")
        except EOFError:
            raw_id = ""

    pipeline = PublishingPipeline(config)
    result = pipeline.publish_raw(raw_id)
    print(format_report(result))
    if result.is_failure():
        sys.exit(1)


def run_revise(
    manuscript_id: int, notes: list[str], config: Optional[PublishingConfig] = None
) -> None:
    """Revise a manuscript draft in place and print its notes."""
    draft = revise_manuscript(manuscript_id, notes, config)
    print(format_revision_report(draft))
    if draft.is_failure():
        sys.exit(1)


if __name__ == "__main__":
    main()
