"""Tests for cosine similarity."""

import numpy as np
import pytest

from topic_engine.core.clustering.similarity import cosine_similarity, cosine_similarity_matrix


class TestCosineSimilarity:
    """Tests for the pairwise cosine metric."""

    def test_identical_vector_is_one(self) -> None:
        """A nonzero vector is perfectly similar to itself."""
        assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)
        assert cosine_similarity([3.0, 4.0], [3.0, 4.0]) == 1.0

    def test_orthogonal_vectors(self) -> None:
        """Orthogonal vectors have similarity 0."""
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_opposite_vectors(self) -> None:
        """Opposite vectors have similarity -1."""
        assert cosine_similarity([1.0, 0.0], [-2.0, 0.0]) == pytest.approx(-1.0)

    def test_scale_invariant(self) -> None:
        """Only direction matters."""
        assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)

    def test_mismatched_lengths_return_zero(self) -> None:
        """Vectors of different length are treated as dissimilar."""
        assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0

    def test_zero_vector_returns_zero(self) -> None:
        """Zero-norm input has no direction."""
        assert cosine_similarity([0.0, 0.0], [1.0, 0.0]) == 0.0
        assert cosine_similarity([1.0, 0.0], [0.0, 0.0]) == 0.0

    def test_returns_python_float(self) -> None:
        """Result is a plain float."""
        assert isinstance(cosine_similarity(np.array([1.0, 0.0]), np.array([1.0, 1.0])), float)

    def test_inputs_not_modified(self) -> None:
        """Metric is pure."""
        a = [1.0, 2.0]
        b = [2.0, 1.0]
        cosine_similarity(a, b)
        assert a == [1.0, 2.0]
        assert b == [2.0, 1.0]


class TestCosineSimilarityMatrix:
    """Tests for the vectorised metric."""

    def test_shape(self) -> None:
        """Result has one row per vector and one column per centroid."""
        result = cosine_similarity_matrix(np.ones((4, 3)), np.ones((2, 3)))
        assert result.shape == (4, 2)

    def test_matches_pairwise(self) -> None:
        """Matrix entries equal the pairwise metric."""
        vectors = np.array([[1.0, 0.0], [0.6, 0.8], [0.0, 2.0]])
        centroids = np.array([[1.0, 1.0], [0.0, 1.0]])

        result = cosine_similarity_matrix(vectors, centroids)

        for i, vector in enumerate(vectors):
            for j, centroid in enumerate(centroids):
                assert result[i, j] == pytest.approx(cosine_similarity(vector, centroid))

    def test_zero_rows_are_zero(self) -> None:
        """Zero-norm rows and columns produce 0 instead of NaN."""
        result = cosine_similarity_matrix(
            np.array([[0.0, 0.0], [1.0, 0.0]]),
            np.array([[1.0, 0.0], [0.0, 0.0]]),
        )
        assert not np.isnan(result).any()
        assert result[0, 0] == 0.0
        assert result[1, 1] == 0.0
        assert result[1, 0] == pytest.approx(1.0)
