"""Domain entities package.

Contains the aggregate roots of the task manager domain.
"""

from .task import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH, Task, TaskState

__all__ = [
    "Task",
    "TaskState",
    "MAX_TITLE_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
]
