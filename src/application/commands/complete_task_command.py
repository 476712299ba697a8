"""Complete task command with handler."""

import logging
import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes
from opentelemetry import trace

from application.mapping import map_task_to_dto
from integration.models import TaskDto
from observability import tasks_completed

from .command_handler_base import TaskCommandHandlerBase

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class CompleteTaskCommand(Command[OperationResult[TaskDto]]):
    """Command to mark a task as done."""

    task_id: str


class CompleteTaskCommandHandler(
    TaskCommandHandlerBase,
    CommandHandler[CompleteTaskCommand, OperationResult[TaskDto]],
):
    """Handle task completion. Completing a done task refreshes its timestamps."""

    async def handle_async(self, request: CompleteTaskCommand) -> OperationResult[TaskDto]:
        command = request
        start_time = time.time()

        add_span_attributes({"task.id": command.task_id})

        try:
            async with self.task_repository.lock(command.task_id):
                task = await self.task_repository.get_async(command.task_id)
                if task is None:
                    return self.task_not_found("complete", command.task_id)

                with tracer.start_as_current_span("complete_task_entity") as span:
                    span.set_attribute("task.was_completed", task.is_completed)
                    task.mark_completed()

                saved_task = await self.task_repository.update_async(task)

        except Exception as e:
            return self.unexpected_error("complete", e)

        tasks_completed.add(1, {"operation": "complete"})
        self.record_processing_time("complete", start_time)
        log.info(f"Completed task {command.task_id}")

        return self.ok(map_task_to_dto(saved_task))
