"""Configuration for the sample publishing pipeline.

The stages are mocks: every manuscript they fetch is built from the defaults
below. All settings can be overridden via environment variables with the
PUBLISH_ prefix, e.g. PUBLISH_ISBN_YEAR=2024.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PublishingConfig(BaseSettings):
    """Publishing pipeline configuration."""

    model_config = {"env_prefix": "PUBLISH_"}

    # Mock manuscript source
    default_title: str = Field(
        default="The Art of Programming", description="Title of fetched manuscripts"
    )
    default_author: str = Field(default="John Doe", description="Author of fetched manuscripts")
    default_content: str = Field(
        default="Initial content...", description="Body of fetched manuscripts"
    )

    # Stage settings
    format_type: str = Field(default="IEEE", description="Style guide applied by formatting")
    required_format: str = Field(default="IEEE", description="Style guide review accepts")
    isbn_year: int = Field(default=2023, description="Year suffix of assigned ISBNs")

    # Logging
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")


class ConfigPresets:
    """Configuration presets for tests and demos."""

    @staticmethod
    def default() -> PublishingConfig:
        """Create the default configuration."""
        return PublishingConfig()

    @staticmethod
    def with_overrides(**kwargs: object) -> PublishingConfig:
        """Create a configuration with specific overrides."""
        return PublishingConfig(**kwargs)  # type: ignore[arg-type]
