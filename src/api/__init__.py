"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, google_play_router, get_google_play_service
from .error_handlers import register_exception_handlers

__all__ = ["health_router", "google_play_router", "get_google_play_service", "register_exception_handlers"]
