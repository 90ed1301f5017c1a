"""Task Tracker - users and the time-tracked tasks they perform."""

__version__ = "0.1.0"
