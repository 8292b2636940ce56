"""
Core business logic module.

Contains the clustering engine, topic sampling helpers and the exception
hierarchy.
"""

from topic_engine.core.exceptions import (
    TopicEngineException,
    ValidationError,
    ClusteringError,
    TopicClusteringError,
)
from topic_engine.core.clustering import ClusterEngine, cluster_chunks_by_topic
from topic_engine.core.topic_sampling import allocate_targets, rank_chunks_by_centroid

__all__ = [
    # Exceptions
    "TopicEngineException",
    "ValidationError",
    "ClusteringError",
    "TopicClusteringError",
    # Business logic
    "ClusterEngine",
    "cluster_chunks_by_topic",
    "allocate_targets",
    "rank_chunks_by_centroid",
]
