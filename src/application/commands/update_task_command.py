"""Update task command with handler."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes
from opentelemetry import trace

from application.mapping import map_task_to_dto
from domain.enums import TaskPriority
from domain.exceptions import DomainValidationError
from integration.models import TaskDto
from observability import tasks_updated

from .command_handler_base import TaskCommandHandlerBase

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class UpdateTaskCommand(Command[OperationResult[TaskDto]]):
    """Command to replace the details, priority and due date of an existing task.

    Every field is applied: this is a full replacement, not a partial patch.
    A ``None`` due date clears it.
    """

    task_id: str
    title: str
    description: Optional[str]
    priority: str
    due_date: Optional[datetime] = None


class UpdateTaskCommandHandler(
    TaskCommandHandlerBase,
    CommandHandler[UpdateTaskCommand, OperationResult[TaskDto]],
):
    """Handle task updates.

    The aggregate returned by the repository is a private copy: when one of
    the updates is rejected the handler returns before saving and the stored
    task is left untouched.
    """

    async def handle_async(self, request: UpdateTaskCommand) -> OperationResult[TaskDto]:
        command = request
        start_time = time.time()

        add_span_attributes(
            {
                "task.id": command.task_id,
                "task.priority": command.priority or "",
                "task.has_due_date": command.due_date is not None,
            }
        )

        try:
            async with self.task_repository.lock(command.task_id):
                task = await self.task_repository.get_async(command.task_id)
                if task is None:
                    return self.task_not_found("update", command.task_id)

                with tracer.start_as_current_span("update_task_entity") as span:
                    priority = TaskPriority.from_name(command.priority)
                    task.update_details(command.title, command.description)
                    task.update_priority(priority)
                    task.update_due_date(command.due_date)
                    span.set_attribute("task.priority", priority.value)

                saved_task = await self.task_repository.update_async(task)

        except DomainValidationError as e:
            return self.validation_failed("update", e)
        except Exception as e:
            return self.unexpected_error("update", e)

        tasks_updated.add(1, {"operation": "update", "priority": priority.value})
        self.record_processing_time("update", start_time)
        log.info(f"Updated task {command.task_id}")

        return self.ok(map_task_to_dto(saved_task))
