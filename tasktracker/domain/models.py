"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
The same models validate rows coming out of the database (from_attributes)
and serialize responses, so the JSON shape lives in one place.
Field aliases are camelCase to match the public HTTP API.
"""

import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A person whose work is tracked.

    The document number (e.g. a passport number) is free text and may be empty.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[int] = None
    document_number: Optional[str] = Field(default=None, alias="documentNumber")


class Task(BaseModel):
    """
    A named piece of work started and stopped by a user.

    A task with no end time is running.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: Optional[int] = None
    user_id: int = Field(..., alias="userId")
    name: str = Field(..., min_length=1)
    start: datetime.datetime
    end: Optional[datetime.datetime] = None

    @property
    def is_running(self) -> bool:
        return self.end is None

    def elapsed_hours(self, now: datetime.datetime) -> float:
        """Hours between start and end, or between start and `now` while running."""
        end = self.end if self.end is not None else now
        return (end - self.start).total_seconds() / 3600


class TaskWithTotalHours(Task):
    """Read-only view of a task with its computed duration. Never persisted."""

    total_hours: float = Field(..., alias="totalHours")
    running: bool = False
