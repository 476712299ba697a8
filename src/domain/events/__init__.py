"""Domain events package.

Contains the domain events registered by the Task aggregate.
"""

from .task import (
    TaskCompletedDomainEvent,
    TaskCreatedDomainEvent,
    TaskDetailsUpdatedDomainEvent,
    TaskDueDateUpdatedDomainEvent,
    TaskPriorityUpdatedDomainEvent,
    TaskStatusUpdatedDomainEvent,
)

__all__ = [
    "TaskCreatedDomainEvent",
    "TaskDetailsUpdatedDomainEvent",
    "TaskPriorityUpdatedDomainEvent",
    "TaskDueDateUpdatedDomainEvent",
    "TaskStatusUpdatedDomainEvent",
    "TaskCompletedDomainEvent",
]
