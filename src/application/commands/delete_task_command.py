"""Delete task command with handler."""

import logging
import time
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Command, CommandHandler
from neuroglia.observability.tracing import add_span_attributes

from observability import tasks_deleted

from .command_handler_base import TaskCommandHandlerBase

log = logging.getLogger(__name__)


@dataclass
class DeleteTaskCommand(Command[OperationResult]):
    """Command to delete an existing task."""

    task_id: str


class DeleteTaskCommandHandler(
    TaskCommandHandlerBase,
    CommandHandler[DeleteTaskCommand, OperationResult],
):
    """Handle task deletion. Deleting is permanent; a second delete is a 404."""

    async def handle_async(self, request: DeleteTaskCommand) -> OperationResult:
        command = request
        start_time = time.time()

        add_span_attributes({"task.id": command.task_id})

        try:
            async with self.task_repository.lock(command.task_id):
                removed = await self.task_repository.remove_async(command.task_id)
        except Exception as e:
            return self.unexpected_error("delete", e)

        if not removed:
            return self.task_not_found("delete", command.task_id)

        tasks_deleted.add(1)
        self.record_processing_time("delete", start_time)
        log.info(f"Deleted task {command.task_id}")

        return self.no_content()
