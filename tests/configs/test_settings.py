"""Tests for configuration settings."""

import pytest
from pydantic import ValidationError

from topic_engine.configs import CelerySettings, ClusteringSettings, Settings, get_settings


class TestClusteringSettings:
    """Tests for clustering defaults and overrides."""

    def test_defaults(self, monkeypatch) -> None:
        """Defaults match the engine's documented behaviour."""
        for var in (
            "CLUSTERING_DEFAULT_NUM_CLUSTERS",
            "CLUSTERING_MIN_CHUNKS_PER_GROUP",
            "CLUSTERING_MAX_ITERATIONS",
            "CLUSTERING_RANDOM_SEED",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = ClusteringSettings()

        assert settings.default_num_clusters == 6
        assert settings.min_chunks_per_group == 1
        assert settings.max_iterations == 10
        assert settings.random_seed is None

    def test_env_override(self, monkeypatch) -> None:
        """CLUSTERING_ prefixed variables override defaults."""
        monkeypatch.setenv("CLUSTERING_MAX_ITERATIONS", "25")
        monkeypatch.setenv("CLUSTERING_RANDOM_SEED", "42")

        settings = ClusteringSettings()

        assert settings.max_iterations == 25
        assert settings.random_seed == 42

    @pytest.mark.parametrize(
        "field",
        ["default_num_clusters", "min_chunks_per_group", "max_iterations"],
    )
    def test_positive_bounds(self, field) -> None:
        """Counts must be at least 1."""
        with pytest.raises(ValidationError):
            ClusteringSettings(**{field: 0})

    def test_timeout_positive(self) -> None:
        """Result timeout must be positive."""
        with pytest.raises(ValidationError):
            ClusteringSettings(result_timeout_seconds=0)


class TestCelerySettings:
    """Tests for Celery connection settings."""

    def test_broker_url(self) -> None:
        """Broker URL is assembled from parts."""
        settings = CelerySettings(broker_user="u", broker_password="p", broker_host="mq", broker_port=5673)

        assert settings.broker_url == "amqp://u:p@mq:5673//"

    def test_result_backend_url(self) -> None:
        """Result backend URL points at Redis."""
        settings = CelerySettings(result_backend_host="cache", result_backend_db=2)

        assert settings.result_backend_url == "redis://cache:6379/2"

    def test_eager_from_env(self, monkeypatch) -> None:
        """CELERY_TASK_ALWAYS_EAGER toggles in-process execution."""
        monkeypatch.setenv("CELERY_TASK_ALWAYS_EAGER", "true")

        assert CelerySettings().task_always_eager is True


class TestSettings:
    """Tests for the aggregated settings."""

    def test_aggregates_modules(self) -> None:
        """Settings exposes clustering and celery sections."""
        settings = Settings()

        assert isinstance(settings.clustering, ClusteringSettings)
        assert isinstance(settings.celery, CelerySettings)

    def test_get_settings_cached(self) -> None:
        """get_settings returns a singleton."""
        assert get_settings() is get_settings()

    def test_log_level_normalized(self, monkeypatch) -> None:
        """LOG_LEVEL is case-insensitive."""
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        """Names logging does not know fail validation."""
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")
