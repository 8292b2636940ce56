"""
Balanced topic sampling helpers.

Consumers of clustering output use these to spread a fixed number of
generated items (questions, flashcards) across topics in proportion to
their size, and to pick the most representative chunks of a topic first.

Dependencies: topic_engine.core.clustering, topic_engine.models
System role: Bridge between clustering output and generation
"""

import math
from collections.abc import Sequence
from typing import Any

from topic_engine.core.clustering.similarity import cosine_similarity
from topic_engine.core.exceptions import ValidationError
from topic_engine.models.cluster import TopicCluster


def rank_chunks_by_centroid(cluster: TopicCluster) -> list[dict[str, Any]]:
    """
    Order a cluster's chunks by similarity to its centroid, most similar first.

    Args:
        cluster: Cluster to rank

    Returns:
        list[dict]: Member chunks; original order when the cluster has no centroid
    """
    if cluster.centroid is None:
        return list(cluster.chunks)

    return sorted(
        cluster.chunks,
        key=lambda chunk: cosine_similarity(chunk.get("embedding") or [], cluster.centroid),
        reverse=True,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def allocate_targets(clusters: Sequence[TopicCluster], total: int) -> list[int]:
    """
    Split ``total`` items across clusters proportionally to cluster size.

    Every cluster gets at least one item when there are enough to go round.
    The remainder is corrected afterwards: any shortfall goes to the
    largest cluster, and any excess comes off whichever cluster holds the
    most items, never taking a cluster below its minimum. The result always
    sums to ``total``.

    Args:
        clusters: Clusters in the order targets should be returned
        total: Number of items to distribute (>= 0)

    Returns:
        list[int]: Target count per cluster, aligned with ``clusters``

    Raises:
        ValidationError: When total is negative
    """
    if total < 0:
        raise ValidationError("total must not be negative", field="total")
    if not clusters:
        return []

    sizes = [cluster.size for cluster in clusters]
    total_size = sum(sizes)
    minimum = 1 if total >= len(clusters) else 0

    if total_size == 0:
        targets = [minimum] * len(clusters)
    else:
        targets = [
            max(minimum, _round_half_up(total * size / total_size))
            for size in sizes
        ]

    # max() keeps the first index on ties
    largest = max(range(len(clusters)), key=lambda i: sizes[i])
    shortfall = total - sum(targets)
    if shortfall > 0:
        targets[largest] += shortfall

    while sum(targets) > total:
        heaviest = max(range(len(targets)), key=lambda i: targets[i])
        if targets[heaviest] <= minimum:
            break
        targets[heaviest] -= 1

    return targets
