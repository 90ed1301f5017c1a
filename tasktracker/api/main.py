import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from tasktracker import __version__
from tasktracker.api.errors import register_error_handlers
from tasktracker.api.routers import users as users_router
from tasktracker.infra.config import Settings
from tasktracker.infra.db import DatabaseEngine
from tasktracker.infra.repository import TaskRepository, UserRepository
from tasktracker.services import ReportService, TimerService, UserService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and wire its services to one database engine.

    The schema is created when the app starts serving.
    """
    if settings is None:
        settings = Settings()
    db = DatabaseEngine(settings.get_db_url(), echo=settings.echo_sql)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await db.create_tables()
        logger.info(f"Database ready at {db.engine.url.render_as_string(hide_password=True)}")
        yield
        await db.dispose()

    app = FastAPI(title="Task Tracker", version=__version__, lifespan=lifespan)

    user_repo = UserRepository(engine=db)
    task_repo = TaskRepository(engine=db)
    app.state.user_service = UserService(user_repo, default_page_size=settings.default_page_size)
    app.state.timer_service = TimerService(
        task_repo,
        user_repo,
        strict_task_owner=settings.strict_task_owner,
        allow_restop=settings.allow_restop,
    )
    app.state.report_service = ReportService(task_repo)

    register_error_handlers(app)
    app.include_router(users_router.router)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app
