"""
Timer Service - Core time tracking logic.

A task is running from the moment it is started until it is stopped.
The service holds no state between calls; every operation is a single
round trip through the repositories.
"""

import datetime
import logging
from typing import Callable, Optional

from tasktracker.domain.errors import ConflictError, InvalidArgumentError, NotFoundError
from tasktracker.domain.models import Task
from tasktracker.infra.repository import TaskRepository, UserRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]


class TimerService:
    """
    Starts and stops tasks for users.

    Two policies are configurable:
    - strict_task_owner: refuse to start a task for a user that does not exist
    - allow_restop: stopping a stopped task overwrites its end time;
      when False it raises ConflictError instead
    """

    def __init__(self, task_repo: TaskRepository, user_repo: Optional[UserRepository] = None,
                 clock: Clock = datetime.datetime.now,
                 strict_task_owner: bool = False, allow_restop: bool = True):
        if strict_task_owner and user_repo is None:
            raise ValueError("strict_task_owner requires a user repository")
        self.task_repo = task_repo
        self.user_repo = user_repo
        self.clock = clock
        self.strict_task_owner = strict_task_owner
        self.allow_restop = allow_restop

    async def start_task(self, user_id: int, name: str) -> Task:
        """
        Start tracking time for a task.

        Several tasks may run at once for the same user.
        """
        if not name:
            raise InvalidArgumentError("Task name is required")

        if self.strict_task_owner:
            if await self.user_repo.get_by_id(user_id) is None:
                raise NotFoundError("User not found")

        task = await self.task_repo.create(Task(
            user_id=user_id,
            name=name,
            start=self.clock()
        ))
        logger.info(f"Task {task.id} '{task.name}' started for user {user_id}")
        return task

    async def stop_task(self, task_id: int) -> Task:
        """
        Stop a task by stamping its end time.

        Concurrent stops of the same task race in the database; the last
        write wins.
        """
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError("Task not found")

        if not task.is_running:
            if not self.allow_restop:
                raise ConflictError(f"Task {task_id} is already stopped")
            logger.warning(f"Task {task_id} was already stopped at {task.end}; overwriting end time")

        task.end = self.clock()
        updated = await self.task_repo.update(task)
        if updated is None:
            raise NotFoundError("Task not found")

        logger.info(f"Task {task_id} stopped after {updated.elapsed_hours(updated.end):.2f}h")
        return updated
