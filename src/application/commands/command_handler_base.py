import logging
import time

from neuroglia.core import OperationResult

from domain.entities import Task
from domain.exceptions import DomainValidationError
from domain.repositories import TaskRepository
from observability import task_processing_time, tasks_failed

log = logging.getLogger(__name__)


class TaskCommandHandlerBase:
    """Represents the base class for the services used to handle Task commands.

    Meant to be mixed in ahead of ``CommandHandler``, which supplies the
    ``bad_request`` / ``not_found`` / ``internal_server_error`` factories used below.
    """

    task_repository: TaskRepository
    """ Gets the repository holding the Task aggregates """

    def __init__(self, task_repository: TaskRepository):
        super().__init__()
        self.task_repository = task_repository

    def validation_failed(self, operation: str, error: DomainValidationError) -> OperationResult:
        """Turns a domain validation error into a 400 result naming the offending field"""
        log.warning(f"Validation error during task {operation}: field={error.field}, {error.message}")
        tasks_failed.add(1, {"reason": "validation", "field": error.field, "operation": operation})
        return self.bad_request(error.message)  # type: ignore[attr-defined]

    def task_not_found(self, operation: str, task_id: str) -> OperationResult:
        """Returns the 404 result for an unknown task id"""
        log.warning(f"Task {task_id} not found for {operation}")
        tasks_failed.add(1, {"reason": "not_found", "operation": operation})
        return self.not_found(Task, task_id)  # type: ignore[attr-defined]

    def unexpected_error(self, operation: str, error: Exception) -> OperationResult:
        """Logs the full error server-side and returns a generic 500 result"""
        log.exception(f"Unexpected error during task {operation}: {error}")
        tasks_failed.add(1, {"reason": "internal", "operation": operation})
        return self.internal_server_error(f"An unexpected error occurred while processing the task {operation}")  # type: ignore[attr-defined]

    @staticmethod
    def record_processing_time(operation: str, start_time: float) -> None:
        processing_time_ms = (time.time() - start_time) * 1000
        task_processing_time.record(processing_time_ms, {"operation": operation})
