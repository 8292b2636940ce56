"""
Shared test fixtures and configuration for entire test suite.

Provides: seeded random generators, chunk sets with known topic structure,
eager Celery execution
Dependencies: pytest, numpy, celery
System role: Test infrastructure and fixture management
"""

import numpy as np
import pytest

from topic_engine.configs import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible k-means++ seeding."""
    return np.random.default_rng(7)


@pytest.fixture
def topic_a_chunks() -> list[dict]:
    """Three chunks pointing mostly along the x axis."""
    return [
        {"id": "a1", "embedding": [1.0, 0.0], "content": "Cell structure"},
        {"id": "a2", "embedding": [0.95, 0.05], "content": "Cell membranes"},
        {"id": "a3", "embedding": [0.9, 0.1], "content": "Organelles"},
    ]


@pytest.fixture
def topic_b_chunks() -> list[dict]:
    """Three chunks pointing mostly along the y axis."""
    return [
        {"id": "b1", "embedding": [0.0, 1.0], "content": "Supply curves"},
        {"id": "b2", "embedding": [0.05, 0.95], "content": "Demand shifts"},
        {"id": "b3", "embedding": [0.1, 0.9], "content": "Market equilibrium"},
    ]


@pytest.fixture
def two_topic_chunks(topic_a_chunks, topic_b_chunks) -> list[dict]:
    """Six chunks forming two well separated topics."""
    return topic_a_chunks + topic_b_chunks


@pytest.fixture
def eager_celery():
    """Run Celery tasks in-process for the duration of a test."""
    from topic_engine.workers import celery_app

    previous = celery_app.conf.task_always_eager
    celery_app.conf.task_always_eager = True
    yield celery_app
    celery_app.conf.task_always_eager = previous
