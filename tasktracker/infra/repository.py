"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. Makes it easy to:
- Switch database implementations (SQLite locally, PostgreSQL in production)
- Inject a test session
- Keep SQLAlchemy errors out of the services (they become StoreError)
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.domain.errors import StoreError
from tasktracker.domain.models import Task, User
from tasktracker.infra.db import DatabaseEngine, TaskModel, UserModel

logger = logging.getLogger(__name__)


class _Repository:
    """Session plumbing shared by the repositories."""

    def __init__(self, engine: Optional[DatabaseEngine] = None, session: Optional[AsyncSession] = None):
        if engine is None and session is None:
            raise ValueError("Repository needs a DatabaseEngine or a session")
        self.engine = engine
        self.session = session

    def _get_session(self) -> AsyncSession:
        """Get session - either injected or create new one"""
        if self.session:
            return self.session
        return self.engine.get_session()

    @staticmethod
    def _store_error(action: str, exc: SQLAlchemyError) -> StoreError:
        logger.error(f"Database error while trying to {action}: {exc}")
        return StoreError(f"Failed to {action}", cause=exc)


class UserRepository(_Repository):
    """
    Handles all User-related database operations.

    Converts between domain models (Pydantic) and ORM models (SQLAlchemy).
    """

    FILTERABLE = {"document_number": UserModel.passport_number}

    async def create(self, user: User) -> User:
        """Create a new user; the store assigns the id"""
        session = self._get_session()
        try:
            async with session:
                model = UserModel(passport_number=user.document_number)
                session.add(model)
                await session.commit()
                await session.refresh(model)
                return self._to_domain(model)
        except SQLAlchemyError as e:
            raise self._store_error("create user", e) from e

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a specific user by ID"""
        session = self._get_session()
        try:
            async with session:
                result = await session.execute(
                    select(UserModel).where(UserModel.id == user_id)
                )
                model = result.scalar_one_or_none()
                return self._to_domain(model) if model else None
        except SQLAlchemyError as e:
            raise self._store_error(f"load user {user_id}", e) from e

    async def list(self, filters: Optional[Dict[str, Any]] = None,
                   offset: int = 0, limit: Optional[int] = None) -> List[User]:
        """
        List users matching equality filters, in insertion order.

        Args:
            filters: Field name -> value; only keys in FILTERABLE are allowed
            offset: Number of rows to skip
            limit: Maximum number of rows, None for all
        """
        stmt = select(UserModel)
        for key, value in (filters or {}).items():
            column = self.FILTERABLE.get(key)
            if column is None:
                raise ValueError(f"Cannot filter users by {key!r}")
            stmt = stmt.where(column == value)
        stmt = stmt.order_by(UserModel.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        session = self._get_session()
        try:
            async with session:
                result = await session.execute(stmt)
                return [self._to_domain(m) for m in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._store_error("list users", e) from e

    async def update(self, user: User) -> Optional[User]:
        """Update an existing user. Returns None if the row is gone."""
        session = self._get_session()
        try:
            async with session:
                result = await session.execute(
                    update(UserModel)
                    .where(UserModel.id == user.id)
                    .values(passport_number=user.document_number)
                )
                await session.commit()
                if result.rowcount == 0:
                    return None
        except SQLAlchemyError as e:
            raise self._store_error(f"update user {user.id}", e) from e
        return await self.get_by_id(user.id)

    async def delete(self, user_id: int) -> bool:
        """Delete a user by ID. Returns False if nothing was deleted."""
        session = self._get_session()
        try:
            async with session:
                result = await session.execute(
                    delete(UserModel).where(UserModel.id == user_id)
                )
                await session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise self._store_error(f"delete user {user_id}", e) from e

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(id=model.id, document_number=model.passport_number)


class TaskRepository(_Repository):
    """
    Handles all Task-related database operations.
    """

    FILTERABLE = {"user_id": TaskModel.user_id, "name": TaskModel.name}

    async def create(self, task: Task) -> Task:
        """Create a new task"""
        session = self._get_session()
        try:
            async with session:
                model = TaskModel(
                    user_id=task.user_id,
                    name=task.name,
                    start=task.start,
                    end=task.end
                )
                session.add(model)
                await session.commit()
                await session.refresh(model)
                return self._to_domain(model)
        except SQLAlchemyError as e:
            raise self._store_error("create task", e) from e

    async def get_by_id(self, task_id: int) -> Optional[Task]:
        """Get a specific task by ID"""
        session = self._get_session()
        try:
            async with session:
                result = await session.execute(
                    select(TaskModel).where(TaskModel.id == task_id)
                )
                model = result.scalar_one_or_none()
                return self._to_domain(model) if model else None
        except SQLAlchemyError as e:
            raise self._store_error(f"load task {task_id}", e) from e

    async def list(self, filters: Optional[Dict[str, Any]] = None,
                   offset: int = 0, limit: Optional[int] = None) -> List[Task]:
        """List tasks matching equality filters, in insertion order"""
        stmt = select(TaskModel)
        for key, value in (filters or {}).items():
            column = self.FILTERABLE.get(key)
            if column is None:
                raise ValueError(f"Cannot filter tasks by {key!r}")
            stmt = stmt.where(column == value)
        stmt = stmt.order_by(TaskModel.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)

        session = self._get_session()
        try:
            async with session:
                result = await session.execute(stmt)
                return [self._to_domain(m) for m in result.scalars().all()]
        except SQLAlchemyError as e:
            raise self._store_error("list tasks", e) from e

    async def list_by_user(self, user_id: int) -> List[Task]:
        """Get every task owned by a user, unpaginated"""
        return await self.list({"user_id": user_id})

    async def update(self, task: Task) -> Optional[Task]:
        """
        Update an existing task.

        Plain last-write-wins: two concurrent updates of the same row
        are not detected.
        """
        session = self._get_session()
        try:
            async with session:
                result = await session.execute(
                    update(TaskModel)
                    .where(TaskModel.id == task.id)
                    .values(
                        user_id=task.user_id,
                        name=task.name,
                        start=task.start,
                        end=task.end
                    )
                )
                await session.commit()
                if result.rowcount == 0:
                    return None
        except SQLAlchemyError as e:
            raise self._store_error(f"update task {task.id}", e) from e
        return await self.get_by_id(task.id)

    async def delete(self, task_id: int) -> bool:
        """Delete a task by ID. Returns False if nothing was deleted."""
        session = self._get_session()
        try:
            async with session:
                result = await session.execute(
                    delete(TaskModel).where(TaskModel.id == task_id)
                )
                await session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise self._store_error(f"delete task {task_id}", e) from e

    @staticmethod
    def _to_domain(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            start=model.start,
            end=model.end
        )
