"""HTTP layer - FastAPI application and routes"""

from .main import create_app

__all__ = ["create_app"]
