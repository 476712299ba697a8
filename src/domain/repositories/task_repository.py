"""Abstract repository for the Task aggregate.

This repository extends the generic Repository interface with the
task-specific operations the application layer relies on.

Implementation: InMemoryTaskRepository (integration layer)
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from neuroglia.data.infrastructure.abstractions import Repository

from domain.entities import Task


class TaskRepository(Repository[Task, str], ABC):
    """Abstract repository for the Task aggregate.

    Keyed by task id. ``add_async`` inserts or overwrites, ``update_async``
    overwrites an existing entry (a durable store would tell the two apart),
    ``remove_async`` reports whether an entry was removed.

    Handlers that read, mutate and write back a single aggregate hold
    ``lock(task_id)`` for the whole sequence.
    """

    @abstractmethod
    async def get_all_async(self) -> list[Task]:
        """Retrieve all tasks, whatever their status."""
        pass

    @abstractmethod
    async def get_active_async(self) -> list[Task]:
        """Retrieve the tasks that are neither Done nor Cancelled."""
        pass

    @abstractmethod
    async def remove_async(self, id: str) -> bool:
        """Remove a task, returning False when no task had that id."""
        pass

    @abstractmethod
    def lock(self, task_id: str) -> AbstractAsyncContextManager:
        """Return the async context manager serializing writers of one task."""
        pass
