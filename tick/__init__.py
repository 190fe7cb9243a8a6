from .core.errors import IndexOutOfRangeError, StoreError, TickError, ValidationError
from .core.models import Task, TaskKind
from .task_list import TaskList

__all__ = [
    "IndexOutOfRangeError",
    "StoreError",
    "Task",
    "TaskKind",
    "TaskList",
    "TickError",
    "ValidationError",
]
