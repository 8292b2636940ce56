"""
Clustering request/response schemas.

Message contracts for the clustering worker. The wire format uses camelCase
keys; snake_case is accepted as well.

Dependencies: pydantic
System role: Clustering task API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from topic_engine.models.chunk import ChunkPayload
from topic_engine.models.cluster import TopicCluster
from topic_engine.models.common import ErrorResponse, SuccessResponse


class ClusterRequest(BaseModel):
    """Request schema for one clustering run."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chunks: list[ChunkPayload] = Field(default_factory=list)
    num_clusters: int = Field(default=6, ge=1, description="Requested cluster count")
    min_chunks_per_group: int = Field(
        default=1,
        ge=1,
        description="Minimum chunks per cluster",
    )
    seed: int | None = Field(
        default=None,
        description="Optional seed for reproducible k-means++ initialization",
    )


ClusterSuccess = SuccessResponse[list[TopicCluster]]
ClusterFailure = ErrorResponse
