#!/usr/bin/env python

"""
Task Tracker Service - Main Entry Point

An HTTP service tracking users and the time they spend on named tasks.

Usage:
    python main.py

Configuration comes from config/settings.yaml and TASKTRACKER_* environment
variables (see tasktracker/infra/config.py).
"""

import sys

import uvicorn

from tasktracker.api import create_app
from tasktracker.infra.config import get_settings
from tasktracker.infra.logging_config import configure_logging


def main():
    """Main entry point"""
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
