"""Application commands package.

One module per Task command, each holding the command and its handler.
"""

from .command_handler_base import TaskCommandHandlerBase
from .complete_task_command import CompleteTaskCommand, CompleteTaskCommandHandler
from .create_task_command import CreateTaskCommand, CreateTaskCommandHandler
from .delete_task_command import DeleteTaskCommand, DeleteTaskCommandHandler
from .update_task_command import UpdateTaskCommand, UpdateTaskCommandHandler
from .update_task_status_command import UpdateTaskStatusCommand, UpdateTaskStatusCommandHandler

__all__ = [
    "TaskCommandHandlerBase",
    "CreateTaskCommand",
    "CreateTaskCommandHandler",
    "UpdateTaskCommand",
    "UpdateTaskCommandHandler",
    "UpdateTaskStatusCommand",
    "UpdateTaskStatusCommandHandler",
    "CompleteTaskCommand",
    "CompleteTaskCommandHandler",
    "DeleteTaskCommand",
    "DeleteTaskCommandHandler",
]
