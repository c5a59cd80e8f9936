"""Sample manuscript publishing pipeline built on the core result types."""

from src.publishing.config import ConfigPresets, PublishingConfig
from src.publishing.pipeline import PublishingPipeline, format_report

__all__ = ["PublishingConfig", "ConfigPresets", "PublishingPipeline", "format_report"]
