"""
Celery workers module.

Runs topic clustering off the request path in worker processes.

Dependencies: celery, topic_engine.configs
System role: Background task processing
"""

from celery import Celery
from celery.signals import setup_logging

from topic_engine.configs import get_settings
from topic_engine.observability.logger import configure_logging

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "topic_engine",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=["topic_engine.workers.tasks.topic_clustering"],
)

celery_app.conf.update(
    task_serializer=celery_config.task_serializer,
    result_serializer=celery_config.result_serializer,
    accept_content=celery_config.accept_content,
    timezone=celery_config.timezone,
    task_always_eager=celery_config.task_always_eager,
    task_time_limit=celery_config.task_time_limit,
    task_soft_time_limit=celery_config.task_soft_time_limit,
    # One clustering request in flight per worker process
    worker_prefetch_multiplier=1,
    task_acks_late=True,
)


@setup_logging.connect
def _configure_worker_logging(**kwargs) -> None:
    """Route worker logging through the application log format."""
    configure_logging(settings.log_level)
