"""Get tasks query with handler."""

import logging
from dataclasses import dataclass
from typing import Optional

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler
from neuroglia.observability.tracing import add_span_attributes

from application.mapping import map_task_to_dto
from domain.enums import TaskStatus
from domain.exceptions import DomainValidationError
from domain.repositories import TaskRepository
from integration.models import TaskDto

log = logging.getLogger(__name__)


@dataclass
class GetTasksQuery(Query[OperationResult[list[TaskDto]]]):
    """Query to list the active tasks, optionally narrowed to a single status."""

    status: Optional[str] = None


class GetTasksQueryHandler(QueryHandler[GetTasksQuery, OperationResult[list[TaskDto]]]):
    """Handle task listing.

    Only active tasks (Todo, InProgress) are considered, so filtering on Done
    or Cancelled always yields an empty list. Results are newest first.
    """

    def __init__(self, task_repository: TaskRepository):
        super().__init__()
        self.task_repository = task_repository

    async def handle_async(self, request: GetTasksQuery) -> OperationResult[list[TaskDto]]:
        query = request
        add_span_attributes({"tasks.status_filter": query.status or ""})

        try:
            status = TaskStatus.from_name(query.status) if query.status else None
        except DomainValidationError as e:
            log.warning(f"Rejected task listing filter: {e.message}")
            return self.bad_request(e.message)

        try:
            tasks = await self.task_repository.get_active_async()
        except Exception as e:
            log.exception(f"Failed to list tasks: {e}")
            return self.internal_server_error("An unexpected error occurred while listing tasks")

        if status is not None:
            tasks = [task for task in tasks if task.state.status == status]
        tasks.sort(key=lambda task: task.state.created_at, reverse=True)

        return self.ok([map_task_to_dto(task) for task in tasks])
