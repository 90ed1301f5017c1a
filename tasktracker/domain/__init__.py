"""Domain layer - Pure business entities and errors"""

from .errors import TrackerError, InvalidArgumentError, NotFoundError, ConflictError, StoreError
from .models import User, Task, TaskWithTotalHours

__all__ = [
    "User", "Task", "TaskWithTotalHours",
    "TrackerError", "InvalidArgumentError", "NotFoundError", "ConflictError", "StoreError",
]
