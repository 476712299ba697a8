"""In-memory implementation of TaskRepository."""

import asyncio
import copy
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from domain.entities import Task
from domain.repositories import TaskRepository

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    In-memory implementation of TaskRepository.

    One instance is shared by every request of the process. A single
    ``asyncio.Lock`` makes each operation atomic, and ``lock(task_id)`` hands
    out one lock per task so a read-modify-write sequence on one aggregate is
    not interleaved with another writer. A per-task lock only lives while some
    caller holds or awaits it.

    Aggregates are deep-copied on the way in and on the way out: callers own
    the instance they mutate, and nothing reaches the store until they write
    it back. Stored copies carry no pending domain events.
    """

    def __init__(self) -> None:
        """Initialize the in-memory repository."""
        self._tasks: dict[str, Task] = {}
        self._guard = asyncio.Lock()
        self._task_locks: dict[str, asyncio.Lock] = {}
        self._task_lock_users: dict[str, int] = {}

    @asynccontextmanager
    async def lock(self, task_id: str) -> AsyncIterator[None]:
        """Hold the lock serializing writers of the specified task."""
        task_lock = self._task_locks.setdefault(task_id, asyncio.Lock())
        self._task_lock_users[task_id] = self._task_lock_users.get(task_id, 0) + 1
        try:
            async with task_lock:
                yield
        finally:
            self._task_lock_users[task_id] -= 1
            if self._task_lock_users[task_id] == 0:
                del self._task_lock_users[task_id]
                del self._task_locks[task_id]

    async def get_async(self, id: str) -> Task | None:
        """Get a task by ID."""
        async with self._guard:
            task = self._tasks.get(id)
            return copy.deepcopy(task) if task is not None else None

    async def get_all_async(self) -> list[Task]:
        """Retrieve all tasks."""
        async with self._guard:
            return [copy.deepcopy(task) for task in self._tasks.values()]

    async def get_active_async(self) -> list[Task]:
        """Retrieve the tasks that are neither Done nor Cancelled."""
        async with self._guard:
            return [copy.deepcopy(task) for task in self._tasks.values() if task.state.status.is_active]

    async def add_async(self, entity: Task) -> Task:
        """Add a task, overwriting any task with the same ID."""
        async with self._guard:
            self._tasks[entity.id()] = self._snapshot(entity)
        logger.debug(f"Added task {entity.id()}")
        return entity

    async def update_async(self, entity: Task) -> Task:
        """Update a task."""
        async with self._guard:
            self._tasks[entity.id()] = self._snapshot(entity)
        logger.debug(f"Updated task {entity.id()}")
        return entity

    async def remove_async(self, id: str) -> bool:
        """Remove a task."""
        async with self._guard:
            task = self._tasks.pop(id, None)
        if task is None:
            return False
        logger.debug(f"Removed task {id}")
        return True

    async def contains_async(self, id: str) -> bool:
        """Check if a task exists."""
        async with self._guard:
            return id in self._tasks

    async def _do_add_async(self, entity: Task) -> Task:
        """Internal add implementation required by Repository base class."""
        return await self.add_async(entity)

    async def _do_update_async(self, entity: Task) -> Task:
        """Internal update implementation required by Repository base class."""
        return await self.update_async(entity)

    async def _do_remove_async(self, id: str) -> None:
        """Internal remove implementation required by Repository base class."""
        await self.remove_async(id)

    def clear_all(self) -> None:
        """Clear all tasks (for testing)."""
        self._tasks.clear()

    @staticmethod
    def _snapshot(entity: Task) -> Task:
        stored = copy.deepcopy(entity)
        # pending events stay with the caller's instance
        stored.clear_pending_events()
        return stored
