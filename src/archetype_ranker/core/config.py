"""
Configuration management for the archetype ranker.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables prefixed with ARCHETYPE_,
e.g. ARCHETYPE_ARCHETYPES_PATH=/srv/models/archetypes.csv
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import DegenerateAnglePolicy, ModelFormat, ScoreMethod


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    CLI flags take precedence over anything configured here.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARCHETYPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "Archetype Ranker"
    app_version: str = "0.3.0"
    debug: bool = False
    environment: str = Field(default="development", description="development, staging, production")
    log_level: str = Field(default="INFO", description="Root log level for CLI and API")

    # ==========================================================================
    # Model Configuration
    # ==========================================================================
    archetypes_path: Path = Field(
        default=Path("assets/archetypes.json"),
        description="Archetype model file (CSV or JSON)",
    )
    archetypes_format: Optional[ModelFormat] = Field(
        default=None,
        description="Model format; inferred from the file suffix when unset",
    )

    # ==========================================================================
    # Scoring
    # ==========================================================================
    default_method: ScoreMethod = ScoreMethod.VECTOR_PROJECTION
    degenerate_angle_policy: DegenerateAnglePolicy = DegenerateAnglePolicy.SENTINEL
    normalize_profiles: bool = Field(
        default=True,
        description="Normalize incoming API profiles before classification",
    )

    # ==========================================================================
    # API Configuration
    # ==========================================================================
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_allow_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Allowed CORS origins. Set to ['*'] for development.",
    )

    @computed_field
    @property
    def effective_archetypes_format(self) -> ModelFormat:
        """Get the configured model format, falling back to the path suffix."""
        return self.archetypes_format or ModelFormat.from_path(self.archetypes_path)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
