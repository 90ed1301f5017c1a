"""
Error hierarchy shared by the services and the HTTP layer.

Every error carries a human readable message; the API maps each kind
to a status code.
"""

from typing import Optional


class TrackerError(Exception):
    """Base class for all errors raised by the task tracker."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidArgumentError(TrackerError):
    """Bad pagination values or missing required fields."""


class NotFoundError(TrackerError):
    """An identifier does not resolve to a record."""


class ConflictError(TrackerError):
    """The record is in a state that forbids the operation (e.g. already stopped)."""


class StoreError(TrackerError):
    """The underlying database failed."""
