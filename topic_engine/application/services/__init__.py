"""
Application services.

Orchestrators that sit between generation pipelines and the clustering worker.
"""

from topic_engine.application.services.topic_clustering_service import TopicClusteringService

__all__ = ["TopicClusteringService"]
