"""
Report Service - ranks a user's tasks by time worked.
"""

import datetime
from typing import Callable, List

from tasktracker.domain.models import Task, TaskWithTotalHours
from tasktracker.infra.repository import TaskRepository


class ReportService:
    """
    Computes the duration of every task of a user and sorts by it.

    Running tasks are measured up to the current time and flagged
    with running=True.
    """

    def __init__(self, task_repo: TaskRepository,
                 clock: Callable[[], datetime.datetime] = datetime.datetime.now):
        self.task_repo = task_repo
        self.clock = clock

    async def get_user_tasks(self, user_id: int) -> List[TaskWithTotalHours]:
        """
        Get all tasks of a user, longest first.

        Returns an empty list when the user has no tasks (or does not exist).
        Ties keep the order the tasks were created in.
        """
        tasks = await self.task_repo.list_by_user(user_id)
        return self.rank(tasks, now=self.clock())

    @staticmethod
    def rank(tasks: List[Task], now: datetime.datetime) -> List[TaskWithTotalHours]:
        """Attach total hours to each task and sort by them, descending (stable)"""
        with_hours = [
            TaskWithTotalHours(
                **task.model_dump(),
                total_hours=task.elapsed_hours(now),
                running=task.is_running
            )
            for task in tasks
        ]
        # sorted() keeps equal keys in input order even with reverse=True
        return sorted(with_hours, key=lambda t: t.total_hours, reverse=True)
