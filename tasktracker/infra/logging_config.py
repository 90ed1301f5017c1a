import logging
import os
from typing import Optional

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a single stream handler on the root logger. Safe to call twice."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (
        level
        or os.getenv("TASKTRACKER_LOG_LEVEL")
        or os.getenv("UVICORN_LOG_LEVEL")
        or "INFO"
    ).upper()
    resolved_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(resolved_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved_level)

    _CONFIGURED = True
