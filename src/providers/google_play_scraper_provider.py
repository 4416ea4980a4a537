"""google_play_scraper 기반 제공자 구현

- 라이브러리가 동기(urllib) 방식이므로 모든 호출은 asyncio.to_thread로 워커 스레드에서 실행
- 라이브러리에 없는 작업(developer/list/similar/data_safety/suggest)은
  ProviderUnsupportedException으로 명시적으로 거절 (HTTP 501)
"""

from __future__ import annotations

import asyncio
from types import MappingProxyType
from typing import Any, Mapping, Optional

import google_play_scraper as gps
from google_play_scraper import Sort
from google_play_scraper.features.reviews import _ContinuationToken

from src.core.config import settings
from src.core.exceptions import ProviderUnsupportedException
from src.core.logging import logger
from src.providers.base import Number


COLLECTIONS: Mapping[str, str] = MappingProxyType({
    "TOP_FREE": "TOP_FREE",
    "TOP_PAID": "TOP_PAID",
    "GROSSING": "GROSSING",
})

_CATEGORY_KEYS = (
    "APPLICATION", "ANDROID_WEAR", "ART_AND_DESIGN", "AUTO_AND_VEHICLES", "BEAUTY",
    "BOOKS_AND_REFERENCE", "BUSINESS", "COMICS", "COMMUNICATION", "DATING",
    "EDUCATION", "ENTERTAINMENT", "EVENTS", "FINANCE", "FOOD_AND_DRINK",
    "HEALTH_AND_FITNESS", "HOUSE_AND_HOME", "LIBRARIES_AND_DEMO", "LIFESTYLE",
    "MAPS_AND_NAVIGATION", "MEDICAL", "MUSIC_AND_AUDIO", "NEWS_AND_MAGAZINES",
    "PARENTING", "PERSONALIZATION", "PHOTOGRAPHY", "PRODUCTIVITY", "SHOPPING",
    "SOCIAL", "SPORTS", "TOOLS", "TRAVEL_AND_LOCAL", "VIDEO_PLAYERS", "WATCH_FACE",
    "WEATHER", "GAME", "GAME_ACTION", "GAME_ADVENTURE", "GAME_ARCADE", "GAME_BOARD",
    "GAME_CARD", "GAME_CASINO", "GAME_CASUAL", "GAME_EDUCATIONAL", "GAME_MUSIC",
    "GAME_PUZZLE", "GAME_RACING", "GAME_ROLE_PLAYING", "GAME_SIMULATION",
    "GAME_SPORTS", "GAME_STRATEGY", "GAME_TRIVIA", "GAME_WORD", "FAMILY",
)
CATEGORIES: Mapping[str, str] = MappingProxyType({key: key for key in _CATEGORY_KEYS})

SORT_OPTIONS: Mapping[str, int] = MappingProxyType({s.name: s.value for s in Sort})

# 라이브러리 기본값과 동일
DEFAULT_SEARCH_HITS = 30
DEFAULT_REVIEW_COUNT = 100


class GooglePlayScraperProvider:
    """google_play_scraper 라이브러리 위임 제공자"""

    name = "google_play_scraper"

    def __init__(
        self,
        default_country: Optional[str] = None,
        default_lang: Optional[str] = None,
    ) -> None:
        self.default_country = default_country or settings.store_default_country
        self.default_lang = default_lang or settings.store_default_lang

    def _locale(self, country: Optional[str], lang: Optional[str]) -> dict[str, str]:
        return {
            "country": country or self.default_country,
            "lang": lang or self.default_lang,
        }

    async def search(
        self,
        term: str,
        *,
        num: Optional[Number] = None,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        full_detail: Optional[bool] = None,
        price: Optional[str] = None,
    ) -> Any:
        locale = self._locale(country, lang)
        n_hits = int(num) if num is not None else DEFAULT_SEARCH_HITS
        logger.debug(f"[Provider] search: term='{term}', n_hits={n_hits}")
        results = await asyncio.to_thread(gps.search, term, n_hits=n_hits, **locale)

        # 가격 필터는 제공자 측 기능이므로 여기서 적용
        if price == "free":
            results = [r for r in results if r.get("free")]
        elif price == "paid":
            results = [r for r in results if not r.get("free")]

        if full_detail:
            results = [
                await asyncio.to_thread(gps.app, r["appId"], **locale)
                for r in results
                if r.get("appId")
            ]
        return results

    async def app(self, app_id: str, *, country: Optional[str] = None, lang: Optional[str] = None) -> Any:
        return await asyncio.to_thread(gps.app, app_id, **self._locale(country, lang))

    async def developer(self, dev_id: str, **kwargs: Any) -> Any:
        raise ProviderUnsupportedException("developer", self.name)

    async def list_apps(self, **kwargs: Any) -> Any:
        raise ProviderUnsupportedException("list_apps", self.name)

    async def reviews(
        self,
        app_id: str,
        *,
        sort: Any = None,
        num: Optional[Number] = None,
        country: Optional[str] = None,
        lang: Optional[str] = None,
        paginate: Optional[bool] = None,
        next_pagination_token: Optional[str] = None,
    ) -> Any:
        locale = self._locale(country, lang)
        sort_value = Sort(sort) if sort is not None else Sort.NEWEST
        count = int(num) if num is not None else DEFAULT_REVIEW_COUNT

        token = None
        if next_pagination_token:
            # 라이브러리는 토큰 문자열과 요청 조건을 함께 보관하므로 현재 조건으로 복원
            # sort는 라이브러리 토큰과 같이 Sort 멤버가 아닌 int 값으로 저장
            token = _ContinuationToken(
                next_pagination_token, locale["lang"], locale["country"], sort_value.value, count, None, None
            )

        data, continuation = await asyncio.to_thread(
            gps.reviews,
            app_id,
            sort=sort_value,
            count=count,
            continuation_token=token,
            **locale,
        )
        next_token = getattr(continuation, "token", None) if paginate else None
        return {"data": data, "nextPaginationToken": next_token}

    async def similar(self, app_id: str, **kwargs: Any) -> Any:
        raise ProviderUnsupportedException("similar", self.name)

    async def permissions(self, app_id: str, *, lang: Optional[str] = None, short: Optional[bool] = None) -> Any:
        result = await asyncio.to_thread(gps.permissions, app_id, **self._locale(None, lang))
        if short:
            # 그룹 구분 없이 권한 문자열만 평탄화
            return [permission for group in result.values() for permission in group]
        return result

    async def data_safety(self, app_id: str, **kwargs: Any) -> Any:
        raise ProviderUnsupportedException("data_safety", self.name)

    async def suggest(self, term: str, **kwargs: Any) -> Any:
        raise ProviderUnsupportedException("suggest", self.name)

    def collections(self) -> Mapping[str, Any]:
        return COLLECTIONS

    def categories(self) -> Mapping[str, Any]:
        return CATEGORIES

    def sort_options(self) -> Mapping[str, Any]:
        return SORT_OPTIONS
