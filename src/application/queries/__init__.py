"""Application queries package."""

from .get_task_by_id_query import GetTaskByIdQuery, GetTaskByIdQueryHandler
from .get_tasks_query import GetTasksQuery, GetTasksQueryHandler

__all__ = [
    "GetTasksQuery",
    "GetTasksQueryHandler",
    "GetTaskByIdQuery",
    "GetTaskByIdQueryHandler",
]
