"""Observability utilities and metrics."""

from .metrics import task_processing_time, tasks_completed, tasks_created, tasks_deleted, tasks_failed, tasks_updated

__all__ = [
    "tasks_created",
    "tasks_updated",
    "tasks_completed",
    "tasks_deleted",
    "tasks_failed",
    "task_processing_time",
]
