"""API routes package."""

from .health_routes import router as health_router
from .google_play_routes import router as google_play_router, get_google_play_service

__all__ = ["health_router", "google_play_router", "get_google_play_service"]
