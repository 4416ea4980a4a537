"""Services implementation package."""

from .google_play_service import GooglePlayService

__all__ = ["GooglePlayService"]
