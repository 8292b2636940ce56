"""
Lloyd iteration for cosine k-means.

Alternates assigning chunks to their most similar centroid and moving each
centroid to the mean of its members until assignments stop changing or the
iteration cap is hit.

Dependencies: numpy
System role: Clustering loop
"""

from dataclasses import dataclass

import numpy as np

from topic_engine.core.clustering.similarity import cosine_similarity_matrix
from topic_engine.core.exceptions import ValidationError

DEFAULT_MAX_ITERATIONS = 10


@dataclass
class LloydResult:
    """Final state of a Lloyd run."""

    centroids: np.ndarray   # (k, d)
    assignments: np.ndarray  # (n,) centroid index per embedding
    iterations: int
    converged: bool


def assign_to_centroids(embeddings: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Assign each embedding to the centroid it is most similar to.

    Ties go to the lowest centroid index.

    Returns:
        np.ndarray: Centroid index per embedding
    """
    similarities = cosine_similarity_matrix(embeddings, centroids)
    return np.argmax(similarities, axis=1)


def update_centroids(
    embeddings: np.ndarray,
    assignments: np.ndarray,
    centroids: np.ndarray,
) -> np.ndarray:
    """
    Move each centroid to the mean of its assigned embeddings.

    A centroid with no members keeps its previous position.

    Returns:
        np.ndarray: New centroid matrix (input is not modified)
    """
    updated = centroids.copy()
    for c in range(len(centroids)):
        members = embeddings[assignments == c]
        if len(members):
            updated[c] = members.mean(axis=0)
    return updated


def iterate(
    embeddings: np.ndarray,
    initial_centroids,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> LloydResult:
    """
    Run assign/update rounds until convergence or the iteration cap.

    Assignments start at all zeros, so a first round that puts every
    embedding on centroid 0 counts as converged.

    Args:
        embeddings: Array of shape (n, d)
        initial_centroids: Seed centroids, shape (k, d)
        max_iterations: Maximum number of assignment rounds

    Returns:
        LloydResult: Final centroids and assignments

    Raises:
        ValidationError: When max_iterations < 1
    """
    if max_iterations < 1:
        raise ValidationError(
            "max_iterations must be at least 1",
            field="max_iterations",
            details={"value": max_iterations},
        )

    embeddings = np.asarray(embeddings, dtype=np.float64)
    centroids = np.array(initial_centroids, dtype=np.float64)
    assignments = np.zeros(len(embeddings), dtype=np.intp)

    for iteration in range(1, max_iterations + 1):
        new_assignments = assign_to_centroids(embeddings, centroids)
        changed = bool(np.any(new_assignments != assignments))
        assignments = new_assignments

        if not changed:
            return LloydResult(centroids, assignments, iteration, converged=True)

        centroids = update_centroids(embeddings, assignments, centroids)

    return LloydResult(centroids, assignments, max_iterations, converged=False)
