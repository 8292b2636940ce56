"""
Domain models.

Pydantic schemas exchanged across the clustering task boundary.
"""

from topic_engine.models.chunk import ChunkPayload
from topic_engine.models.cluster import TopicCluster
from topic_engine.models.clustering import ClusterFailure, ClusterRequest, ClusterSuccess
from topic_engine.models.common import ErrorResponse, SuccessResponse

__all__ = [
    "ChunkPayload",
    "TopicCluster",
    "ClusterRequest",
    "ClusterSuccess",
    "ClusterFailure",
    "SuccessResponse",
    "ErrorResponse",
]
