"""
k-means++ centroid initialization.

Picks the first seed uniformly, then each further seed with probability
proportional to its squared cosine distance from the nearest seed so far.

Dependencies: numpy
System role: Seed selection for Lloyd iteration
"""

import numpy as np

from topic_engine.core.clustering.similarity import cosine_similarity_matrix


def _roulette_select(weights: np.ndarray, rng: np.random.Generator) -> int:
    """Pick an index with probability proportional to its weight."""
    remaining = rng.random() * weights.sum()
    candidates = np.flatnonzero(weights > 0)
    for idx in candidates:
        remaining -= weights[idx]
        if remaining <= 0:
            return int(idx)
    # Rounding left a sliver of mass unspent
    return int(candidates[-1])


def select_seed_indices(
    embeddings: np.ndarray,
    k: int,
    rng: np.random.Generator | None = None,
) -> list[int]:
    """
    Choose row indices to use as initial centroids.

    Args:
        embeddings: Array of shape (n, d)
        k: Number of centroids wanted (>= 1)
        rng: Random generator (a fresh unseeded one when None)

    Returns:
        list[int]: Distinct row indices in selection order. Fewer than ``k``
            when every remaining row coincides with an existing seed.
    """
    n = len(embeddings)
    if n <= k:
        return list(range(n))

    rng = rng if rng is not None else np.random.default_rng()

    chosen = [int(rng.integers(n))]
    used = np.zeros(n, dtype=bool)
    used[chosen[0]] = True

    while len(chosen) < k:
        similarities = cosine_similarity_matrix(embeddings, embeddings[chosen])
        nearest = 1.0 - similarities.max(axis=1)
        weights = np.where(used, 0.0, nearest * nearest)

        if weights.sum() <= 0:
            break

        idx = _roulette_select(weights, rng)
        chosen.append(idx)
        used[idx] = True

    return chosen


def initialize_centroids(
    embeddings: np.ndarray,
    k: int,
    rng: np.random.Generator | None = None,
) -> list[np.ndarray]:
    """
    Build initial centroids with k-means++ seeding.

    When there are no more embeddings than ``k`` every embedding becomes
    its own centroid.

    Args:
        embeddings: Array of shape (n, d)
        k: Number of centroids wanted (>= 1)
        rng: Random generator (a fresh unseeded one when None)

    Returns:
        list[np.ndarray]: Centroid copies, possibly fewer than ``k``
    """
    embeddings = np.asarray(embeddings, dtype=np.float64)
    return [embeddings[idx].copy() for idx in select_seed_indices(embeddings, k, rng)]
