"""Services layer - Business logic"""

from .user_service import UserService
from .timer_service import TimerService
from .report_service import ReportService

__all__ = ["UserService", "TimerService", "ReportService"]
