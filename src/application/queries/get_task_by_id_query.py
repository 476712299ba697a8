"""Get task by ID query with handler."""

import logging
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from application.mapping import map_task_to_dto
from domain.entities import Task
from domain.repositories import TaskRepository
from integration.models import TaskDto

log = logging.getLogger(__name__)


@dataclass
class GetTaskByIdQuery(Query[OperationResult[TaskDto]]):
    """Query to retrieve a single task by its id."""

    task_id: str


class GetTaskByIdQueryHandler(QueryHandler[GetTaskByIdQuery, OperationResult[TaskDto]]):
    def __init__(self, task_repository: TaskRepository):
        super().__init__()
        self.task_repository = task_repository

    async def handle_async(self, request: GetTaskByIdQuery) -> OperationResult[TaskDto]:
        try:
            task = await self.task_repository.get_async(request.task_id)
        except Exception as e:
            log.exception(f"Failed to retrieve task {request.task_id}: {e}")
            return self.internal_server_error("An unexpected error occurred while retrieving the task")

        if task is None:
            log.warning(f"Task {request.task_id} not found")
            return self.not_found(Task, request.task_id)

        return self.ok(map_task_to_dto(task))
