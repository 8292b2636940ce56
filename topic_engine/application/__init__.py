"""
Application layer.

Caller-side services that coordinate the clustering worker.
"""
