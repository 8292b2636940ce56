"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from topic_engine.configs.base import BaseSettings
from topic_engine.configs.celery_config import CelerySettings
from topic_engine.configs.clustering import ClusteringSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    clustering: ClusteringSettings = Field(default_factory=ClusteringSettings)
    celery: CelerySettings = Field(default_factory=CelerySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached so environment variables are read once.

    Returns:
        Settings: Application settings instance

    Usage:
        from topic_engine.configs import get_settings
        settings = get_settings()
    """
    return Settings()
