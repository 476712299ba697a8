from .task_mapping import map_task_to_dto

__all__ = ["map_task_to_dto"]
