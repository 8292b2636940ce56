"""
Cosine k-means topic clustering.

Similarity metric, k-means++ seeding, Lloyd iteration and the engine that
ties them together.
"""

from .similarity import cosine_similarity, cosine_similarity_matrix
from .seeding import initialize_centroids, select_seed_indices
from .lloyd import (
    DEFAULT_MAX_ITERATIONS,
    LloydResult,
    assign_to_centroids,
    iterate,
    update_centroids,
)
from .engine import (
    DEFAULT_MIN_CHUNKS_PER_GROUP,
    DEFAULT_NUM_CLUSTERS,
    ClusterEngine,
    cluster_chunks_by_topic,
    parse_embedding,
)

__all__ = [
    # Similarity
    "cosine_similarity",
    "cosine_similarity_matrix",
    # Seeding
    "select_seed_indices",
    "initialize_centroids",
    # Lloyd
    "LloydResult",
    "assign_to_centroids",
    "update_centroids",
    "iterate",
    "DEFAULT_MAX_ITERATIONS",
    # Engine
    "ClusterEngine",
    "cluster_chunks_by_topic",
    "parse_embedding",
    "DEFAULT_NUM_CLUSTERS",
    "DEFAULT_MIN_CHUNKS_PER_GROUP",
]
