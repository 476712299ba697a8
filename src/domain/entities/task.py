"""Task aggregate definition using the AggregateState pattern

    Every mutation validates its arguments first, then registers a domain
    event and applies it to the state. Events stay on the aggregate: the
    repository stores the state, it does not replay events.
"""

from datetime import datetime, timezone
from typing import Optional, cast
from uuid import uuid4

from multipledispatch import dispatch
from neuroglia.data.abstractions import AggregateRoot, AggregateState

from domain.enums import TaskPriority, TaskStatus
from domain.events.task import (
    TaskCompletedDomainEvent,
    TaskCreatedDomainEvent,
    TaskDetailsUpdatedDomainEvent,
    TaskDueDateUpdatedDomainEvent,
    TaskPriorityUpdatedDomainEvent,
    TaskStatusUpdatedDomainEvent,
)
from domain.exceptions import DomainValidationError

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 2000


def _utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _validate_title(title: str) -> str:
    if title is None or not title.strip():
        raise DomainValidationError("title", "The 'title' field cannot be null, empty or whitespace.")
    if len(title) > MAX_TITLE_LENGTH:
        raise DomainValidationError("title", f"The 'title' field cannot exceed {MAX_TITLE_LENGTH} characters.")
    return title


def _validate_description(description: Optional[str]) -> str:
    description = description or ""
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise DomainValidationError("description", f"The 'description' field cannot exceed {MAX_DESCRIPTION_LENGTH} characters.")
    return description


def _validate_due_date(due_date: Optional[datetime], now: datetime) -> Optional[datetime]:
    if due_date is None:
        return None
    due_date = _utc(due_date)
    if due_date <= now:
        raise DomainValidationError("dueDate", "The 'dueDate' field must be in the future.")
    return due_date


class TaskState(AggregateState[str]):
    """Encapsulates the persisted state for the Task aggregate."""

    id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime]
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime]

    def __init__(self) -> None:
        super().__init__()
        self.id = ""
        self.title = ""
        self.description = ""
        self.status = TaskStatus.TODO
        self.priority = TaskPriority.MEDIUM
        self.due_date = None

        now = datetime.now(timezone.utc)
        self.created_at = now
        self.updated_at = now
        self.completed_at = None

    @dispatch(TaskCreatedDomainEvent)
    def on(self, event: TaskCreatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the creation event to the state."""
        self.id = event.aggregate_id
        self.title = event.title
        self.description = event.description
        self.status = event.status
        self.priority = event.priority
        self.due_date = event.due_date
        self.created_at = event.created_at
        self.updated_at = event.created_at
        self.completed_at = None

    @dispatch(TaskDetailsUpdatedDomainEvent)
    def on(self, event: TaskDetailsUpdatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the details updated event to the state."""
        self.title = event.new_title
        self.description = event.new_description
        self.updated_at = event.updated_at

    @dispatch(TaskPriorityUpdatedDomainEvent)
    def on(self, event: TaskPriorityUpdatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the priority updated event to the state."""
        self.priority = event.new_priority
        self.updated_at = event.updated_at

    @dispatch(TaskDueDateUpdatedDomainEvent)
    def on(self, event: TaskDueDateUpdatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the due date updated event to the state."""
        self.due_date = event.new_due_date
        self.updated_at = event.updated_at

    @dispatch(TaskStatusUpdatedDomainEvent)
    def on(self, event: TaskStatusUpdatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the status updated event to the state."""
        self.status = event.new_status
        self.completed_at = event.completed_at
        self.updated_at = event.updated_at

    @dispatch(TaskCompletedDomainEvent)
    def on(self, event: TaskCompletedDomainEvent) -> None:  # type: ignore[override]
        """Apply the completed event to the state."""
        self.status = TaskStatus.DONE
        self.completed_at = event.completed_at
        self.updated_at = event.completed_at


class Task(AggregateRoot[TaskState, str]):
    """Task aggregate root following the AggregateState pattern.

    Use :meth:`create` to build a new task: it validates its arguments before
    the aggregate exists.
    """

    def __init__(
        self,
        title: str,
        description: str = "",
        priority: TaskPriority = TaskPriority.MEDIUM,
        due_date: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        task_id: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.state.on(
            self.register_event(  # type: ignore
                TaskCreatedDomainEvent(
                    aggregate_id=task_id or str(uuid4()),
                    title=title,
                    description=description,
                    status=TaskStatus.TODO,
                    priority=priority,
                    due_date=due_date,
                    created_at=created_at or datetime.now(timezone.utc),
                )
            )
        )

    @staticmethod
    def create(
        title: str,
        description: Optional[str] = None,
        priority: Optional[TaskPriority] = None,
        due_date: Optional[datetime] = None,
    ) -> "Task":
        """Create a new Todo task.

        Args:
            title: Required, not blank, at most 200 characters
            description: Optional, at most 2000 characters, defaults to ""
            priority: Defaults to Medium
            due_date: Optional, must be strictly in the future

        Raises:
            DomainValidationError: when an argument breaks one of the rules above
        """
        now = datetime.now(timezone.utc)
        return Task(
            title=_validate_title(title),
            description=_validate_description(description),
            priority=priority or TaskPriority.MEDIUM,
            due_date=_validate_due_date(due_date, now),
            created_at=now,
        )

    def id(self) -> str:
        """Return the aggregate identifier with a precise type."""

        aggregate_id = super().id()
        if aggregate_id is None:
            raise ValueError("Task aggregate identifier has not been initialized")
        return cast(str, aggregate_id)

    @property
    def is_completed(self) -> bool:
        return self.state.status == TaskStatus.DONE

    def update_details(self, title: str, description: Optional[str]) -> None:
        title = _validate_title(title)
        description = _validate_description(description)
        self.state.on(
            self.register_event(  # type: ignore
                TaskDetailsUpdatedDomainEvent(
                    aggregate_id=self.id(),
                    new_title=title,
                    new_description=description,
                    updated_at=self._now(),
                )
            )
        )

    def update_priority(self, priority: Optional[TaskPriority]) -> None:
        if priority is None:
            raise DomainValidationError("priority", "The 'priority' field cannot be null.")
        self.state.on(
            self.register_event(  # type: ignore
                TaskPriorityUpdatedDomainEvent(
                    aggregate_id=self.id(),
                    new_priority=priority,
                    updated_at=self._now(),
                )
            )
        )

    def update_due_date(self, due_date: Optional[datetime]) -> None:
        """Set the due date, or clear it with None."""
        now = self._now()
        self.state.on(
            self.register_event(  # type: ignore
                TaskDueDateUpdatedDomainEvent(
                    aggregate_id=self.id(),
                    new_due_date=_validate_due_date(due_date, now),
                    updated_at=now,
                )
            )
        )

    def update_status(self, status: TaskStatus) -> None:
        """Move the task to any status.

        Entering Done stamps ``completed_at``; leaving Done clears it, so the
        completion timestamp is only ever present on a Done task.
        """
        if status is None:
            raise DomainValidationError("status", "The 'status' field cannot be null.")
        now = self._now()
        self.state.on(
            self.register_event(  # type: ignore
                TaskStatusUpdatedDomainEvent(
                    aggregate_id=self.id(),
                    new_status=status,
                    completed_at=now if status == TaskStatus.DONE else None,
                    updated_at=now,
                )
            )
        )

    def mark_completed(self) -> None:
        self.state.on(
            self.register_event(  # type: ignore
                TaskCompletedDomainEvent(
                    aggregate_id=self.id(),
                    completed_at=self._now(),
                )
            )
        )

    def _now(self) -> datetime:
        # updated_at must never precede created_at, even if the wall clock steps back
        return max(datetime.now(timezone.utc), self.state.created_at)
