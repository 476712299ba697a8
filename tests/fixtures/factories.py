"""Test data factories and builders.

Provides reusable factory classes for creating test data with sensible defaults
and easy customization.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4

from domain.entities import Task
from domain.enums import TaskPriority, TaskStatus
from integration.models import TaskDto

# ============================================================================
# TASK FACTORY
# ============================================================================


class TaskFactory:
    """Factory for creating Task entities with sensible defaults."""

    @staticmethod
    def create(
        task_id: Optional[str] = None,
        title: str = "Test Task",
        description: str = "Test task description",
        priority: TaskPriority = TaskPriority.MEDIUM,
        due_date: Optional[datetime] = None,
        status: TaskStatus = TaskStatus.TODO,
        created_at: Optional[datetime] = None,
    ) -> Task:
        """Create a Task with defaults that can be overridden.

        ``created_at`` may lie in the past, which lets tests control ordering.
        """
        task: Task = Task(
            task_id=task_id or str(uuid4()),
            title=title,
            description=description,
            priority=priority,
            due_date=due_date,
            created_at=created_at,
        )
        if status != TaskStatus.TODO:
            task.update_status(status)
        return task

    @staticmethod
    def create_many(count: int, **kwargs: Any) -> list[Task]:
        """Create multiple tasks with incrementing titles and creation times, oldest first."""
        start = datetime.now(timezone.utc) - timedelta(hours=count)
        tasks: list[Task] = [TaskFactory.create(title=f"Test Task {i+1}", created_at=start + timedelta(minutes=i), **kwargs) for i in range(count)]
        return tasks

    @staticmethod
    def create_in_progress() -> Task:
        """Create a task with IN_PROGRESS status."""
        return TaskFactory.create(status=TaskStatus.IN_PROGRESS)

    @staticmethod
    def create_done() -> Task:
        """Create a task with DONE status."""
        return TaskFactory.create(status=TaskStatus.DONE)

    @staticmethod
    def create_cancelled() -> Task:
        """Create a task with CANCELLED status."""
        return TaskFactory.create(status=TaskStatus.CANCELLED)

    @staticmethod
    def create_high_priority() -> Task:
        """Create a high priority task."""
        return TaskFactory.create(priority=TaskPriority.HIGH)

    @staticmethod
    def create_due_in(days: int) -> Task:
        """Create a task due the given number of days from now."""
        return TaskFactory.create(due_date=datetime.now(timezone.utc) + timedelta(days=days))


# ============================================================================
# TASKDTO FACTORY
# ============================================================================


class TaskDtoFactory:
    """Factory for creating TaskDto instances with sensible defaults."""

    @staticmethod
    def create(
        task_id: Optional[str] = None,
        title: str = "Test Task",
        description: str = "Test task description",
        priority: TaskPriority = TaskPriority.MEDIUM,
        status: TaskStatus = TaskStatus.TODO,
        due_date: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> TaskDto:
        """Create a TaskDto with defaults that can be overridden."""
        now = datetime.now(timezone.utc)
        return TaskDto(
            id=task_id or str(uuid4()),
            title=title,
            description=description,
            status=status,
            priority=priority,
            due_date=due_date,
            is_completed=status == TaskStatus.DONE,
            completed_at=now if status == TaskStatus.DONE else None,
            created_at=created_at or now,
            updated_at=updated_at or created_at or now,
        )
