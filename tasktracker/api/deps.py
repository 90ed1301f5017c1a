"""Dependency providers: services are built once at startup and kept on app.state."""

from fastapi import Request

from tasktracker.services import ReportService, TimerService, UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_timer_service(request: Request) -> TimerService:
    return request.app.state.timer_service


def get_report_service(request: Request) -> ReportService:
    return request.app.state.report_service
