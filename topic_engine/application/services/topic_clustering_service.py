"""
Topic clustering service.

Caller-side counterpart of the clustering worker: submits one clustering
message, waits for its single reply and turns it into TopicCluster models
or a TopicClusteringError.

Dependencies: celery, topic_engine.workers, topic_engine.models
System role: Clustering dispatch for generation pipelines
"""

import logging
from collections.abc import Sequence
from typing import Any

from celery.exceptions import CeleryError
from celery.exceptions import TimeoutError as CeleryTimeoutError
from pydantic import BaseModel, ValidationError as PydanticValidationError

from topic_engine.configs import get_settings
from topic_engine.core.exceptions import TopicClusteringError
from topic_engine.models.cluster import TopicCluster
from topic_engine.models.clustering import ClusterSuccess
from topic_engine.observability.log_utils import log_with_context
from topic_engine.workers.tasks.topic_clustering import cluster_topics

logger = logging.getLogger(__name__)


class TopicClusteringService:
    """
    Topic clustering service orchestrator.

    Dispatches clustering work to the Celery worker so the calling process
    is never blocked by the clustering computation itself.
    """

    def __init__(self, timeout_seconds: float | None = None) -> None:
        """
        Initialize topic clustering service.

        Args:
            timeout_seconds: How long to wait for a reply (defaults to settings)
        """
        self.settings = get_settings().clustering
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else self.settings.result_timeout_seconds
        )

    def build_message(
        self,
        chunks: Sequence[Any],
        num_clusters: int | None = None,
        min_chunks_per_group: int | None = None,
        seed: int | None = None,
    ) -> dict[str, Any]:
        """
        Build a clustering request message.

        Args:
            chunks: Chunk dicts or pydantic models with id and embedding
            num_clusters: Requested cluster count (defaults to settings)
            min_chunks_per_group: Minimum chunks per cluster (defaults to settings)
            seed: Optional seed for reproducible results

        Returns:
            dict: JSON-serializable request message
        """
        message = {
            "chunks": [
                chunk.model_dump(mode="json") if isinstance(chunk, BaseModel) else dict(chunk)
                for chunk in chunks
            ],
            "numClusters": (
                num_clusters if num_clusters is not None else self.settings.default_num_clusters
            ),
            "minChunksPerGroup": (
                min_chunks_per_group
                if min_chunks_per_group is not None
                else self.settings.min_chunks_per_group
            ),
        }
        if seed is not None:
            message["seed"] = seed
        return message

    def cluster_chunks(
        self,
        chunks: Sequence[Any],
        num_clusters: int | None = None,
        min_chunks_per_group: int | None = None,
        seed: int | None = None,
    ) -> list[TopicCluster]:
        """
        Cluster chunks by topic in a worker and wait for the result.

        Args:
            chunks: Chunk dicts or pydantic models with id and embedding
            num_clusters: Requested cluster count (defaults to settings)
            min_chunks_per_group: Minimum chunks per cluster (defaults to settings)
            seed: Optional seed for reproducible results

        Returns:
            list[TopicCluster]: Clusters, largest first

        Raises:
            TopicClusteringError: When the worker reports failure, the reply
                times out, or the task cannot be dispatched
        """
        message = self.build_message(chunks, num_clusters, min_chunks_per_group, seed)

        try:
            async_result = cluster_topics.apply_async(args=[message])
        except (CeleryError, OSError) as e:
            raise TopicClusteringError(f"Failed to dispatch clustering task: {e}") from e

        task_id = async_result.id
        try:
            reply = async_result.get(timeout=self.timeout_seconds)
        except CeleryTimeoutError as e:
            raise TopicClusteringError(
                f"Clustering task timed out after {self.timeout_seconds}s",
                task_id=task_id,
            ) from e
        except Exception as e:
            # Worker crashes and hard time limits surface here
            raise TopicClusteringError(f"Clustering task failed: {e}", task_id=task_id) from e

        if not isinstance(reply, dict) or not reply.get("success"):
            error = reply.get("error") if isinstance(reply, dict) else None
            raise TopicClusteringError(error or "Clustering task reported failure", task_id=task_id)

        try:
            clusters = ClusterSuccess.model_validate(reply).result
        except PydanticValidationError as e:
            raise TopicClusteringError(f"Malformed clustering reply: {e}", task_id=task_id) from e

        log_with_context(
            logger,
            logging.INFO,
            "Topic clusters received",
            task_id=task_id,
            chunk_count=len(message["chunks"]),
            cluster_count=len(clusters),
        )
        return clusters
