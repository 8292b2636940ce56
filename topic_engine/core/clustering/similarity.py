"""
Cosine similarity between embedding vectors.

Dependencies: numpy
System role: Distance metric for seeding and assignment
"""

import numpy as np


def cosine_similarity(a, b) -> float:
    """
    Compute cosine similarity between two vectors.

    Vectors of different length are treated as maximally dissimilar and
    zero-norm vectors have no direction; both cases return 0.0.

    Args:
        a: First vector (sequence of numbers or 1-D array)
        b: Second vector

    Returns:
        float: dot(a, b) / (|a| * |b|)
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        return 0.0

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def cosine_similarity_matrix(vectors: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """
    Pairwise cosine similarity between rows of two matrices.

    Args:
        vectors: Array of shape (n, d)
        centroids: Array of shape (k, d)

    Returns:
        np.ndarray: Array of shape (n, k); rows or columns with zero norm are 0.0
    """
    vectors = np.asarray(vectors, dtype=np.float64)
    centroids = np.asarray(centroids, dtype=np.float64)

    vector_norms = np.linalg.norm(vectors, axis=1)
    centroid_norms = np.linalg.norm(centroids, axis=1)
    denominator = np.outer(vector_norms, centroid_norms)
    dots = vectors @ centroids.T

    similarities = np.zeros_like(dots)
    np.divide(dots, denominator, out=similarities, where=denominator != 0)
    return similarities
