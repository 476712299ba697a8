"""Maps Task aggregates to the TaskDto read model returned by handlers."""

from domain.entities import Task
from integration.models import TaskDto


def map_task_to_dto(task: Task) -> TaskDto:
    state = task.state
    return TaskDto(
        id=task.id(),
        title=state.title,
        description=state.description,
        status=state.status,
        priority=state.priority,
        due_date=state.due_date,
        is_completed=task.is_completed,
        completed_at=state.completed_at,
        created_at=state.created_at,
        updated_at=state.updated_at,
    )
