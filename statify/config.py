"""Configuration management for Statify.

Uses pydantic-settings for type-safe environment variable loading.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from STATIFY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STATIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Calculation
    default_num_classes: int = Field(
        default=5,
        description="Class count for class width (values below 1 use Sturges' rule)",
    )
    histogram_bins: int = Field(
        default=8,
        ge=1,
        description="Number of bins in the frequency distribution",
    )

    # Display
    display_precision: int = Field(
        default=4,
        ge=0,
        description="Decimal places for formatted results",
    )

    # Insights
    outlier_iqr_multiplier: float = Field(
        default=1.5,
        gt=0,
        description="Tukey fence distance in IQRs for outlier detection",
    )
    min_recommended_sample_size: int = Field(
        default=30,
        ge=1,
        description="Samples smaller than this get a sample-size note",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
