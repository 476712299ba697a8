"""Tasks API controller.

Provides endpoints for:
- Creating, updating and deleting tasks
- Listing active tasks, optionally by status
- Changing the status of a task and completing it
"""

from datetime import datetime
from typing import Optional

from classy_fastapi.decorators import delete, get, post, put
from fastapi import Query
from fastapi.responses import Response
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from application.commands import (
    CompleteTaskCommand,
    CompleteTaskCommandHandler,
    CreateTaskCommand,
    CreateTaskCommandHandler,
    DeleteTaskCommand,
    DeleteTaskCommandHandler,
    UpdateTaskCommand,
    UpdateTaskCommandHandler,
    UpdateTaskStatusCommand,
    UpdateTaskStatusCommandHandler,
)
from application.queries import GetTaskByIdQuery, GetTaskByIdQueryHandler, GetTasksQuery, GetTasksQueryHandler
from domain.entities import MAX_DESCRIPTION_LENGTH, MAX_TITLE_LENGTH
from domain.enums import TaskPriority, TaskStatus

from .controller_base import ApiControllerBase

# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================


class CreateTaskRequest(BaseModel):
    """Request to create a new task."""

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Title of the task")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="Free-form description")
    priority: str = Field(..., description="One of Low, Medium, High, Critical (case-insensitive)")
    due_date: Optional[datetime] = Field(default=None, description="Optional due date, must be in the future")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Write spec",
                "description": "First draft, to be reviewed by the team",
                "priority": "High",
                "dueDate": "2030-01-01T09:00:00Z",
            }
        }


class UpdateTaskRequest(BaseModel):
    """Request to replace the details of a task. Every field is applied."""

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH, description="New title")
    description: Optional[str] = Field(default=None, max_length=MAX_DESCRIPTION_LENGTH, description="New description")
    priority: str = Field(..., description="One of Low, Medium, High, Critical (case-insensitive)")
    due_date: Optional[datetime] = Field(default=None, description="New due date, null clears it")

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UpdateTaskStatusRequest(BaseModel):
    """Request to move a task to another status."""

    status: str = Field(..., description="One of Todo, InProgress, Done, Cancelled (case-insensitive)")

    class Config:
        json_schema_extra = {"example": {"status": "InProgress"}}


class TaskResponse(BaseModel):
    """Representation of a task returned by the API."""

    id: str
    title: str
    description: str
    priority: TaskPriority
    status: TaskStatus
    due_date: Optional[datetime] = None
    is_completed: bool
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ============================================================================
# CONTROLLER
# ============================================================================


class TasksController(ApiControllerBase):
    """Controller for task management operations."""

    def __init__(
        self,
        create_task_handler: CreateTaskCommandHandler,
        update_task_handler: UpdateTaskCommandHandler,
        update_task_status_handler: UpdateTaskStatusCommandHandler,
        complete_task_handler: CompleteTaskCommandHandler,
        delete_task_handler: DeleteTaskCommandHandler,
        get_tasks_handler: GetTasksQueryHandler,
        get_task_by_id_handler: GetTaskByIdQueryHandler,
    ) -> None:
        self.name = "Tasks"
        self.create_task_handler = create_task_handler
        self.update_task_handler = update_task_handler
        self.update_task_status_handler = update_task_status_handler
        self.complete_task_handler = complete_task_handler
        self.delete_task_handler = delete_task_handler
        self.get_tasks_handler = get_tasks_handler
        self.get_task_by_id_handler = get_task_by_id_handler
        super().__init__(prefix="/tasks", tags=["Tasks"])

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    @get("")
    async def get_tasks(
        self,
        status: Optional[str] = Query(default=None, description="Only return active tasks with this status"),
    ) -> Response:
        """List the active tasks (Todo and InProgress), newest first."""
        result = await self.get_tasks_handler.handle_async(GetTasksQuery(status=status))
        return self.process(result, TaskResponse)

    @get("/{task_id}")
    async def get_task(self, task_id: str) -> Response:
        """Get a single task by id, whatever its status."""
        result = await self.get_task_by_id_handler.handle_async(GetTaskByIdQuery(task_id=task_id))
        return self.process(result, TaskResponse)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    @post("", status_code=201)
    async def create_task(self, request: CreateTaskRequest) -> Response:
        """Create a new task.

        The new task starts in the Todo status. The response carries a
        ``Location`` header pointing at the created task.
        """
        command = CreateTaskCommand(
            title=request.title,
            description=request.description,
            priority=request.priority,
            due_date=request.due_date,
        )
        result = await self.create_task_handler.handle_async(command)
        headers = {"Location": f"/tasks/{result.data.id}"} if result.is_success else None
        return self.process(result, TaskResponse, headers)

    @put("/{task_id}")
    async def update_task(self, task_id: str, request: UpdateTaskRequest) -> Response:
        """Replace the title, description, priority and due date of a task."""
        command = UpdateTaskCommand(
            task_id=task_id,
            title=request.title,
            description=request.description,
            priority=request.priority,
            due_date=request.due_date,
        )
        result = await self.update_task_handler.handle_async(command)
        return self.process(result, TaskResponse)

    @put("/{task_id}/status")
    async def update_task_status(self, task_id: str, request: UpdateTaskStatusRequest) -> Response:
        """Move a task to another status."""
        result = await self.update_task_status_handler.handle_async(UpdateTaskStatusCommand(task_id=task_id, status=request.status))
        return self.process(result, TaskResponse)

    @post("/{task_id}/complete")
    async def complete_task(self, task_id: str) -> Response:
        """Mark a task as done."""
        result = await self.complete_task_handler.handle_async(CompleteTaskCommand(task_id=task_id))
        return self.process(result, TaskResponse)

    @delete("/{task_id}", status_code=204)
    async def delete_task(self, task_id: str) -> Response:
        """Delete a task permanently."""
        result = await self.delete_task_handler.handle_async(DeleteTaskCommand(task_id=task_id))
        return self.process(result)
