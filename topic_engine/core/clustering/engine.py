"""
Topic clustering engine.

Entry point that turns a list of embedded chunks into size-ordered topic
clusters: validates embeddings, caps the cluster count, seeds with k-means++
and runs Lloyd iteration.

Dependencies: numpy, topic_engine.core.clustering, topic_engine.models
System role: Core clustering orchestration
"""

import json
import logging
import math
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

import numpy as np
from pydantic import BaseModel

from topic_engine.configs import get_settings
from topic_engine.core.clustering.lloyd import DEFAULT_MAX_ITERATIONS, iterate
from topic_engine.core.clustering.seeding import initialize_centroids
from topic_engine.core.exceptions import (
    ClusteringError,
    TopicEngineException,
    ValidationError,
)
from topic_engine.models.cluster import TopicCluster
from topic_engine.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

DEFAULT_NUM_CLUSTERS = 6
DEFAULT_MIN_CHUNKS_PER_GROUP = 1


def parse_embedding(value: Any) -> np.ndarray | None:
    """
    Parse an embedding into a float64 vector.

    Accepts a sequence or 1-D array of finite real numbers, or a string
    holding such a list as JSON (how some databases hand back vector
    columns).

    Args:
        value: Raw embedding field

    Returns:
        np.ndarray | None: Parsed copy, or None when the value is unusable
    """
    if value is None:
        return None

    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except (ValueError, RecursionError):
            return None

    if isinstance(value, np.ndarray):
        if value.ndim != 1 or not np.issubdtype(value.dtype, np.number):
            return None
        values = value
    elif isinstance(value, (list, tuple)):
        if not all(isinstance(x, Real) and not isinstance(x, (bool, np.bool_)) for x in value):
            return None
        values = value
    else:
        return None

    if len(values) == 0:
        return None

    try:
        vector = np.array(values, dtype=np.float64)
    except (OverflowError, TypeError, ValueError):
        return None
    if not np.all(np.isfinite(vector)):
        return None
    return vector


def _as_records(chunks: Sequence[Any]) -> list[dict[str, Any]]:
    """Shallow-copy chunk records so the caller's objects are never written to."""
    records = []
    for position, chunk in enumerate(chunks):
        if isinstance(chunk, BaseModel):
            records.append(chunk.model_dump())
        elif isinstance(chunk, Mapping):
            records.append(dict(chunk))
        else:
            raise ValidationError(
                "Chunks must be mappings or pydantic models",
                field="chunks",
                details={"position": position, "type": type(chunk).__name__},
            )
    return records


class ClusterEngine:
    """
    Cosine k-means over chunk embeddings.

    Stateless between calls: each ``cluster`` call works on its own copies
    and never writes to the caller's chunk records.
    """

    def __init__(
        self,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        rng: np.random.Generator | None = None,
    ) -> None:
        """
        Initialize engine.

        Args:
            max_iterations: Cap on Lloyd assign/update rounds
            rng: Random generator for seeding (fresh per call when None)

        Raises:
            ValidationError: When max_iterations < 1
        """
        if max_iterations < 1:
            raise ValidationError(
                "max_iterations must be at least 1",
                field="max_iterations",
                details={"value": max_iterations},
            )
        self.max_iterations = max_iterations
        self.rng = rng

    @classmethod
    def from_settings(cls, seed: int | None = None) -> "ClusterEngine":
        """
        Build an engine from ClusteringSettings.

        Args:
            seed: Overrides the configured random seed when given

        Returns:
            ClusterEngine: Configured engine
        """
        settings = get_settings().clustering
        seed = seed if seed is not None else settings.random_seed
        rng = np.random.default_rng(seed) if seed is not None else None
        return cls(max_iterations=settings.max_iterations, rng=rng)

    def cluster(
        self,
        chunks: Sequence[Any],
        num_clusters: int = DEFAULT_NUM_CLUSTERS,
        min_chunks_per_group: int = DEFAULT_MIN_CHUNKS_PER_GROUP,
    ) -> list[TopicCluster]:
        """
        Group chunks into topic clusters.

        Args:
            chunks: Chunk records (mappings or pydantic models) with ``id``
                and ``embedding``
            num_clusters: Requested number of clusters
            min_chunks_per_group: Minimum chunks per cluster, caps the
                effective cluster count at ceil(len(chunks) / this)

        Returns:
            list[TopicCluster]: Non-empty clusters, largest first. A single
                centroid-less cluster holding every input chunk when there
                is nothing to cluster.

        Raises:
            ValidationError: When num_clusters or min_chunks_per_group < 1
            ClusteringError: When seeding or iteration fails unexpectedly
        """
        if num_clusters < 1:
            raise ValidationError(
                "num_clusters must be at least 1",
                field="num_clusters",
                details={"value": num_clusters},
            )
        if min_chunks_per_group < 1:
            raise ValidationError(
                "min_chunks_per_group must be at least 1",
                field="min_chunks_per_group",
                details={"value": min_chunks_per_group},
            )

        if not chunks:
            return []

        originals = _as_records(chunks)
        effective_k = min(num_clusters, math.ceil(len(originals) / min_chunks_per_group))
        if effective_k <= 1:
            return [TopicCluster(chunks=originals, centroid=None, size=len(originals))]

        records, embeddings = self._valid_chunks(originals)
        if not records:
            log_with_context(
                logger,
                logging.INFO,
                "No clusterable embeddings, returning input as one cluster",
                chunk_count=len(originals),
            )
            return [TopicCluster(chunks=originals, centroid=None, size=len(originals))]

        matrix = np.vstack(embeddings)
        rng = self.rng if self.rng is not None else np.random.default_rng()
        try:
            seeds = initialize_centroids(matrix, effective_k, rng)
            outcome = iterate(matrix, seeds, self.max_iterations)
        except TopicEngineException:
            raise
        except Exception as e:
            raise ClusteringError(
                f"Failed to cluster chunks: {e}",
                details={"valid_count": len(records), "effective_k": effective_k},
            ) from e

        clusters = []
        for c, centroid in enumerate(outcome.centroids):
            members = [records[i] for i in np.flatnonzero(outcome.assignments == c)]
            if members:
                clusters.append(
                    TopicCluster(
                        chunks=members,
                        centroid=centroid.tolist(),
                        size=len(members),
                    )
                )

        clusters.sort(key=lambda cluster: cluster.size, reverse=True)

        log_with_context(
            logger,
            logging.INFO,
            "Topic clustering complete",
            chunk_count=len(chunks),
            valid_count=len(records),
            effective_k=effective_k,
            seed_count=len(seeds),
            iterations=outcome.iterations,
            converged=outcome.converged,
            cluster_sizes=",".join(str(cluster.size) for cluster in clusters),
        )
        return clusters

    def _valid_chunks(
        self,
        chunks: list[dict[str, Any]],
    ) -> tuple[list[dict[str, Any]], list[np.ndarray]]:
        """
        Copy out chunks whose embeddings parse and share one dimension.

        The dimension is fixed by the first valid chunk. Copies carry the
        parsed embedding as a list of floats.
        """
        records: list[dict[str, Any]] = []
        embeddings: list[np.ndarray] = []
        dimension = None
        unparseable = 0
        mismatched = 0

        for chunk in chunks:
            vector = parse_embedding(chunk.get("embedding"))
            if vector is None:
                unparseable += 1
                continue
            if dimension is None:
                dimension = len(vector)
            elif len(vector) != dimension:
                mismatched += 1
                continue

            records.append({**chunk, "embedding": vector.tolist()})
            embeddings.append(vector)

        if mismatched:
            log_with_context(
                logger,
                logging.WARNING,
                "Dropped chunks with mismatched embedding dimension",
                expected_dimension=dimension,
                dropped_count=mismatched,
            )
        if unparseable:
            logger.debug(f"Dropped {unparseable} chunks without a usable embedding")

        return records, embeddings


def cluster_chunks_by_topic(
    chunks: Sequence[Any],
    num_clusters: int = DEFAULT_NUM_CLUSTERS,
    min_chunks_per_group: int = DEFAULT_MIN_CHUNKS_PER_GROUP,
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: np.random.Generator | None = None,
) -> list[TopicCluster]:
    """
    Cluster chunks with a one-off engine.

    See ClusterEngine.cluster for argument and return semantics.
    """
    engine = ClusterEngine(max_iterations=max_iterations, rng=rng)
    return engine.cluster(chunks, num_clusters, min_chunks_per_group)
