"""Store data provider backends.

공개 API는 이 파일에서만 export합니다.
"""

from src.core.config import settings
from src.providers.base import StoreDataProvider


def create_provider(backend: str | None = None) -> StoreDataProvider:
    """설정된 백엔드 이름으로 제공자 생성"""
    backend = backend or settings.store_provider_backend
    if backend == "google_play_scraper":
        from src.providers.google_play_scraper_provider import GooglePlayScraperProvider

        return GooglePlayScraperProvider()
    raise ValueError(f"Unsupported store_provider_backend: {backend}")


__all__ = ["StoreDataProvider", "create_provider"]
