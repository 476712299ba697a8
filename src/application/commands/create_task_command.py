"""Create task command with handler."""

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
from domain.entities import Task
from domain.enums import TaskPriority
from domain.exceptions import DomainValidationError
from integration.models import TaskDto
from observability import tasks_created

from .command_handler_base import TaskCommandHandlerBase

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class CreateTaskCommand(Command[OperationResult[TaskDto]]):
    """Command to create a new task."""

    title: str
    description: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[datetime] = None


class CreateTaskCommandHandler(
    TaskCommandHandlerBase,
    CommandHandler[CreateTaskCommand, OperationResult[TaskDto]],
):
    """Handle task creation."""

    async def handle_async(self, request: CreateTaskCommand) -> OperationResult[TaskDto]:
        command = request
        start_time = time.time()

        add_span_attributes(
            {
                "task.title": command.title,
                "task.priority": command.priority or "",
                "task.has_due_date": command.due_date is not None,
            }
        )

        try:
            with tracer.start_as_current_span("create_task_entity") as span:
                # an omitted priority defaults to Medium, a given one must parse
                priority = TaskPriority.from_name(command.priority) if command.priority is not None else TaskPriority.MEDIUM
                task = Task.create(
                    title=command.title,
                    description=command.description,
                    priority=priority,
                    due_date=command.due_date,
                )
                span.set_attribute("task.id", task.id())
                span.set_attribute("task.priority", priority.value)

            saved_task = await self.task_repository.add_async(task)

        except DomainValidationError as e:
            return self.validation_failed("create", e)
        except Exception as e:
            return self.unexpected_error("create", e)

        tasks_created.add(1, {"priority": priority.value, "has_due_date": command.due_date is not None})
        self.record_processing_time("create", start_time)
        log.info(f"Created task {saved_task.id()} ('{saved_task.state.title}', {priority.value})")

        return self.created(map_task_to_dto(saved_task))
