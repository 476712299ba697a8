"""Integration layer repositories package.

Contains the repository implementations of the interfaces defined in
domain/repositories/.
"""

from .in_memory_task_repository import InMemoryTaskRepository

__all__ = [
    "InMemoryTaskRepository",
]
