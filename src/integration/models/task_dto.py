import datetime
from dataclasses import dataclass
from typing import Optional

from neuroglia.data.abstractions import Identifiable, queryable

from domain.enums import TaskPriority, TaskStatus


@queryable
@dataclass
class TaskDto(Identifiable[str]):
    id: str
    title: str
    description: str
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[datetime.datetime] = None
    is_completed: bool = False
    completed_at: Optional[datetime.datetime] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None
