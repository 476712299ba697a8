"""Main application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.controllers import HealthController, TasksController
from api.error_handlers import register_error_handlers
from application.commands import (
    CompleteTaskCommandHandler,
    CreateTaskCommandHandler,
    DeleteTaskCommandHandler,
    UpdateTaskCommandHandler,
    UpdateTaskStatusCommandHandler,
)
from application.queries import GetTaskByIdQueryHandler, GetTasksQueryHandler
from application.settings import Settings, app_settings, configure_logging
from domain.repositories import TaskRepository
from integration.repositories import InMemoryTaskRepository

log = logging.getLogger(__name__)


def create_app(task_repository: Optional[TaskRepository] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Every handler is built here from the given repository and handed to the
    controllers, so the whole object graph is visible in one place.

    Args:
        task_repository: Repository holding the tasks, a fresh in-memory one by default
        settings: Application settings, ``app_settings`` by default

    Returns:
        Configured FastAPI application
    """
    settings = settings or app_settings
    configure_logging(log_level=settings.log_level)
    task_repository = task_repository or InMemoryTaskRepository()

    log.debug(f"Creating {settings.app_name} application...")

    app = FastAPI(
        title=settings.app_name,
        description="Task management REST API",
        version=settings.app_version,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.task_repository = task_repository

    tasks_controller = TasksController(
        create_task_handler=CreateTaskCommandHandler(task_repository),
        update_task_handler=UpdateTaskCommandHandler(task_repository),
        update_task_status_handler=UpdateTaskStatusCommandHandler(task_repository),
        complete_task_handler=CompleteTaskCommandHandler(task_repository),
        delete_task_handler=DeleteTaskCommandHandler(task_repository),
        get_tasks_handler=GetTasksQueryHandler(task_repository),
        get_task_by_id_handler=GetTaskByIdQueryHandler(task_repository),
    )
    app.include_router(HealthController(settings).router)
    app.include_router(tasks_controller.router)

    register_error_handlers(app)

    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    log.info(f"{settings.app_name} {settings.app_version} created ({type(task_repository).__name__})")
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:create_app",
        factory=True,
        host=app_settings.app_host,
        port=app_settings.app_port,
        reload=app_settings.debug,
    )
