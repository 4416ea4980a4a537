"""비즈니스 로직 서비스 - export only."""

from .impl import GooglePlayService

__all__ = ["GooglePlayService"]
