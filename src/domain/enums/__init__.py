"""Domain enumerations package.

This package contains all enumerations used across the domain layer,
organized into logical modules for maintainability.
"""

from .task import TaskPriority, TaskStatus

__all__ = [
    "TaskStatus",
    "TaskPriority",
]
