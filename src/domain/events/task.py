"""Domain events for Task aggregate operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from neuroglia.data.abstractions import DomainEvent
from neuroglia.eventing.cloud_events.decorators import cloudevent

from domain.enums import TaskPriority, TaskStatus


@cloudevent("task.created.v1")
@dataclass
class TaskCreatedDomainEvent(DomainEvent):
    """Event raised when a new task aggregate is created."""

    aggregate_id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime]
    created_at: datetime

    def __init__(
        self,
        aggregate_id: str,
        title: str,
        description: str,
        status: TaskStatus,
        priority: TaskPriority,
        due_date: Optional[datetime],
        created_at: datetime,
    ) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.title = title
        self.description = description
        self.status = status
        self.priority = priority
        self.due_date = due_date
        self.created_at = created_at


@cloudevent("task.details.updated.v1")
@dataclass
class TaskDetailsUpdatedDomainEvent(DomainEvent):
    """Event raised when a task's title and description are replaced."""

    def __init__(
        self,
        aggregate_id: str,
        new_title: str,
        new_description: str,
        updated_at: datetime,
    ):
        super().__init__(aggregate_id)
        self.new_title = new_title
        self.new_description = new_description
        self.updated_at = updated_at

    aggregate_id: str
    new_title: str
    new_description: str
    updated_at: datetime


@cloudevent("task.priority.updated.v1")
@dataclass
class TaskPriorityUpdatedDomainEvent(DomainEvent):
    """Event raised when an existing task's priority is updated."""

    def __init__(
        self,
        aggregate_id: str,
        new_priority: TaskPriority,
        updated_at: datetime,
    ):
        super().__init__(aggregate_id)
        self.new_priority = new_priority
        self.updated_at = updated_at

    aggregate_id: str
    new_priority: TaskPriority
    updated_at: datetime


@cloudevent("task.due_date.updated.v1")
@dataclass
class TaskDueDateUpdatedDomainEvent(DomainEvent):
    """Event raised when a task's due date is set or cleared."""

    def __init__(
        self,
        aggregate_id: str,
        new_due_date: Optional[datetime],
        updated_at: datetime,
    ):
        super().__init__(aggregate_id)
        self.new_due_date = new_due_date
        self.updated_at = updated_at

    aggregate_id: str
    new_due_date: Optional[datetime]
    updated_at: datetime


@cloudevent("task.status.updated.v1")
@dataclass
class TaskStatusUpdatedDomainEvent(DomainEvent):
    """Event raised when an existing task's status is updated.

    ``completed_at`` is the completion timestamp the task carries after the
    transition: set when moving to Done, None otherwise.
    """

    def __init__(
        self,
        aggregate_id: str,
        new_status: TaskStatus,
        completed_at: Optional[datetime],
        updated_at: datetime,
    ):
        super().__init__(aggregate_id)
        self.new_status = new_status
        self.completed_at = completed_at
        self.updated_at = updated_at

    aggregate_id: str
    new_status: TaskStatus
    completed_at: Optional[datetime]
    updated_at: datetime


@cloudevent("task.completed.v1")
@dataclass
class TaskCompletedDomainEvent(DomainEvent):
    """Event raised when a task is marked as completed."""

    def __init__(
        self,
        aggregate_id: str,
        completed_at: datetime,
    ):
        super().__init__(aggregate_id)
        self.completed_at = completed_at

    aggregate_id: str
    completed_at: datetime
