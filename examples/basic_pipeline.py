"""Basic publishing pipeline example.

Demonstrates a successful run, a run that fails at the first stage, and
an in-place revision of a draft.

Usage:
    python examples/basic_pipeline.py
"""

from src.publishing.config import PublishingConfig
from src.publishing.pipeline import PublishingPipeline, format_report
from src.publishing.revision import format_revision_report, revise_manuscript


def main() -> None:
    # 1. Configure pipeline
    config = PublishingConfig(isbn_year=2023)
    pipeline = PublishingPipeline(config)

    # 2. Publish a valid and an invalid manuscript
    for manuscript_id in (42, 0):
        result = pipeline.publish(manuscript_id)
        print(f"\n# Manuscript {manuscript_id}")
        print(format_report(result))

    # 3. A review that rejects the configured style guide
    strict = PublishingPipeline(PublishingConfig(required_format="APA"))
    print("\n# Manuscript 7 (review requires APA)")
    print(format_report(strict.publish(7)))

    # 4. Revise a draft in place
    draft = revise_manuscript(42, ["Tighten chapter 2", "Add references"], config)
    print("\n# Revision of manuscript 42")
    print(format_revision_report(draft))


if __name__ == "__main__":
    main()
