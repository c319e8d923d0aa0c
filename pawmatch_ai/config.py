"""
Configuration management for PawMatch AI.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Matching agent API
    agent_api_base_url: str = Field(
        default="http://localhost:3000/api",
        description="Base URL of the external matching agent service"
    )
    agent_api_key: Optional[str] = Field(default=None, description="Matching agent API key")
    api_timeout: int = Field(default=120, description="Agent request timeout in seconds")

    # Agent identifiers
    match_coordinator_agent_id: str = Field(
        default="6987f79df8f483cee28b9a5e",
        description="Agent that coordinates the full compatibility assessment"
    )
    adopter_profile_agent_id: str = Field(
        default="6987f74fe5513e27d5435bc6",
        description="Adopter profiling sub-agent (not invoked directly)"
    )
    animal_compatibility_agent_id: str = Field(
        default="6987f77866ea18a43a069b09",
        description="Animal compatibility sub-agent (not invoked directly)"
    )

    # Results presentation
    top_factors_count: int = Field(
        default=3,
        ge=1,
        le=6,
        description="Number of breakdown factors highlighted on each result card"
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
