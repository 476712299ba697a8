"""Integration layer DTOs package.

Contains the read models returned by command and query handlers.
"""

from .task_dto import TaskDto

__all__ = [
    "TaskDto",
]
