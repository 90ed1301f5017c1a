"""Infrastructure layer - Database, persistence and configuration"""

from .db import DatabaseEngine
from .models import UserModel, TaskModel
from .repository import UserRepository, TaskRepository

__all__ = ["DatabaseEngine", "UserModel", "TaskModel", "UserRepository", "TaskRepository"]
