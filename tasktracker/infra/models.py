"""
SQLAlchemy ORM models.
Separated from db.py for cleaner imports.
"""

from .db import UserModel, TaskModel, Base

__all__ = ["UserModel", "TaskModel", "Base"]
