"""API controllers package."""

from .controller_base import ApiControllerBase
from .health_controller import HealthController
from .tasks_controller import TasksController

__all__ = [
    "ApiControllerBase",
    "HealthController",
    "TasksController",
]
