"""
Topic clustering Celery task.

Task: cluster_topics(message)
Flow: validate request -> cluster -> reply {success, result} or {success, error}

Each message gets exactly one reply. Failures of any kind are reported in
the reply instead of raised, so retry decisions stay with the caller.

Dependencies: celery, pydantic, topic_engine.core, topic_engine.models
System role: Worker boundary for the clustering engine
"""

import logging
from typing import Any

from topic_engine.core.clustering import ClusterEngine
from topic_engine.models.clustering import ClusterFailure, ClusterRequest, ClusterSuccess
from topic_engine.observability.correlation import clear_correlation_id, set_correlation_id
from topic_engine.observability.log_utils import log_exception_with_context, log_with_context
from topic_engine.workers import celery_app

logger = logging.getLogger(__name__)


def handle_cluster_message(message: dict[str, Any]) -> dict[str, Any]:
    """
    Run one clustering request and build its reply.

    Args:
        message: ``{chunks, numClusters, minChunksPerGroup}`` plus optional ``seed``

    Returns:
        dict: ``{"success": True, "result": [...]}`` or
            ``{"success": False, "error": "..."}``, JSON-serializable
    """
    try:
        request = ClusterRequest.model_validate(message)
        chunks = [chunk.model_dump() for chunk in request.chunks]

        engine = ClusterEngine.from_settings(seed=request.seed)
        clusters = engine.cluster(
            chunks,
            num_clusters=request.num_clusters,
            min_chunks_per_group=request.min_chunks_per_group,
        )

        log_with_context(
            logger,
            logging.INFO,
            "Clustering request succeeded",
            chunk_count=len(chunks),
            cluster_count=len(clusters),
        )
        return ClusterSuccess(result=clusters).model_dump(mode="json")
    except Exception as e:
        log_exception_with_context(
            logger,
            "Clustering request failed",
            e,
            message_keys=sorted(message) if isinstance(message, dict) else None,
        )
        return ClusterFailure(error=str(e) or type(e).__name__).model_dump(mode="json")


@celery_app.task(bind=True, name="topic_engine.cluster_topics", max_retries=0)
def cluster_topics(self, message: dict[str, Any]) -> dict[str, Any]:
    """
    Cluster chunks by topic in a worker process.

    Args:
        message: Clustering request message

    Returns:
        dict: Success or failure reply
    """
    set_correlation_id(self.request.id)
    try:
        return handle_cluster_message(message)
    finally:
        clear_correlation_id()
