"""
Task modules for background clustering.

Exports: cluster_topics, handle_cluster_message
"""

from .topic_clustering import cluster_topics, handle_cluster_message

__all__ = ["cluster_topics", "handle_cluster_message"]
