"""
Topic clustering configuration settings.

Defaults for cluster count, group size, iteration cap and seeding used by
the clustering engine and the caller-side dispatch service.

Dependencies: pydantic, pydantic_settings
System role: Clustering engine configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClusteringSettings(BaseSettings):
    """Settings for k-means topic clustering."""

    model_config = SettingsConfigDict(
        env_prefix="CLUSTERING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_num_clusters: int = Field(
        default=6,
        ge=1,
        description="Cluster count requested when the caller does not pass one",
    )
    min_chunks_per_group: int = Field(
        default=1,
        ge=1,
        description="Minimum chunks per cluster used to cap the effective cluster count",
    )
    max_iterations: int = Field(
        default=10,
        ge=1,
        description="Hard cap on Lloyd assign/update iterations",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for k-means++ initialization (None = nondeterministic)",
    )
    result_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="How long callers wait for a clustering task reply",
    )
