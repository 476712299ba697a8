"""Update task status command with handler."""

import logging
import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes
from opentelemetry import trace

from application.mapping import map_task_to_dto
from domain.enums import TaskStatus
from domain.exceptions import DomainValidationError
from integration.models import TaskDto
from observability import tasks_completed, tasks_updated

from .command_handler_base import TaskCommandHandlerBase

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class UpdateTaskStatusCommand(Command[OperationResult[TaskDto]]):
    """Command to move a task to another status."""

    task_id: str
    status: str


class UpdateTaskStatusCommandHandler(
    TaskCommandHandlerBase,
    CommandHandler[UpdateTaskStatusCommand, OperationResult[TaskDto]],
):
    """Handle status changes. Any status may follow any other."""

    async def handle_async(self, request: UpdateTaskStatusCommand) -> OperationResult[TaskDto]:
        command = request
        start_time = time.time()

        add_span_attributes({"task.id": command.task_id, "task.status": command.status or ""})

        try:
            status = TaskStatus.from_name(command.status)

            async with self.task_repository.lock(command.task_id):
                task = await self.task_repository.get_async(command.task_id)
                if task is None:
                    return self.task_not_found("update_status", command.task_id)

                with tracer.start_as_current_span("update_task_status") as span:
                    span.set_attribute("task.previous_status", task.state.status.value)
                    task.update_status(status)
                    span.set_attribute("task.status", status.value)

                saved_task = await self.task_repository.update_async(task)

        except DomainValidationError as e:
            return self.validation_failed("update_status", e)
        except Exception as e:
            return self.unexpected_error("update_status", e)

        tasks_updated.add(1, {"operation": "update_status", "status": status.value})
        if status == TaskStatus.DONE:
            tasks_completed.add(1, {"operation": "update_status"})
        self.record_processing_time("update_status", start_time)
        log.info(f"Task {command.task_id} moved to {status.value}")

        return self.ok(map_task_to_dto(saved_task))
