"""
Topic cluster domain model.

Dependencies: pydantic
System role: Clustering engine output
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TopicCluster(BaseModel):
    """A group of chunks judged to cover one topic."""

    model_config = ConfigDict(frozen=True)

    chunks: list[dict[str, Any]] = Field(description="Member chunks")
    centroid: list[float] | None = Field(
        default=None,
        description="Mean member embedding (None when no clustering was performed)",
    )
    size: int = Field(ge=0, description="Number of member chunks")
