"""전역 테스트 설정

역할:
- 테스트 환경 구성 (src import 전에 환경 변수 지정)
- 공통 Fake 제공자 주입
- 전역 상태 초기화

금지:
- 실제 Google Play 네트워크 호출
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Optional

import pytest

# 설정 싱글톤이 import 시점에 생성되므로 모듈 로드 단계에서 지정
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "INFO"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CRAWL_ENABLED"] = "false"
os.environ["CRAWL_MODE"] = "log"

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.fixtures import APP_DETAIL, PERMISSIONS, REVIEWS, SEARCH_RESULTS  # noqa: E402


class FakeProvider:
    """GooglePlayService/라우트 테스트용 가짜 제공자

    - 호출 이름과 인자를 calls에 기록
    - error가 지정되면 모든 조회 작업에서 예외 발생
    """

    name = "fake"

    def __init__(self, error: Optional[Exception] = None, search_results: Optional[list] = None):
        self.error = error
        self.search_results = SEARCH_RESULTS if search_results is None else search_results
        self.calls: list[tuple[str, tuple, dict[str, Any]]] = []

    def _record(self, op: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((op, args, kwargs))
        if self.error:
            raise self.error

    @property
    def last_call(self) -> tuple[str, tuple, dict[str, Any]]:
        return self.calls[-1]

    async def search(self, term: str, **kwargs: Any) -> Any:
        self._record("search", term, **kwargs)
        return self.search_results

    async def app(self, app_id: str, **kwargs: Any) -> Any:
        self._record("app", app_id, **kwargs)
        return APP_DETAIL

    async def developer(self, dev_id: str, **kwargs: Any) -> Any:
        self._record("developer", dev_id, **kwargs)
        return SEARCH_RESULTS[:2]

    async def list_apps(self, **kwargs: Any) -> Any:
        self._record("list_apps", **kwargs)
        return SEARCH_RESULTS

    async def reviews(self, app_id: str, **kwargs: Any) -> Any:
        self._record("reviews", app_id, **kwargs)
        return {"data": REVIEWS, "nextPaginationToken": "tok-2" if kwargs.get("paginate") else None}

    async def similar(self, app_id: str, **kwargs: Any) -> Any:
        self._record("similar", app_id, **kwargs)
        return SEARCH_RESULTS[1:]

    async def permissions(self, app_id: str, **kwargs: Any) -> Any:
        self._record("permissions", app_id, **kwargs)
        return PERMISSIONS

    async def data_safety(self, app_id: str, **kwargs: Any) -> Any:
        self._record("data_safety", app_id, **kwargs)
        return {"sharedData": [], "collectedData": [], "securityPractices": []}

    async def suggest(self, term: str, **kwargs: Any) -> Any:
        self._record("suggest", term, **kwargs)
        return [f"{term} of clans", f"{term} royale"]

    def collections(self) -> dict[str, Any]:
        return {"TOP_FREE": "TOP_FREE", "TOP_PAID": "TOP_PAID", "GROSSING": "GROSSING"}

    def categories(self) -> dict[str, Any]:
        return {"APPLICATION": "APPLICATION", "GAME": "GAME", "GAME_ACTION": "GAME_ACTION"}

    def sort_options(self) -> dict[str, Any]:
        return {"HELPFULNESS": 1, "NEWEST": 2, "RATING": 3}


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def provider_factory() -> type[FakeProvider]:
    """FakeProvider(error=..., search_results=...) 생성용"""
    return FakeProvider
