"""GooglePlayService (pass-through 파사드) 테스트

PRD 원칙:
- 외부 호출 없음 (FakeProvider 사용)
- 제공자 결과를 가공 없이 반환
- 제공자 예외는 그대로 전파 (재시도 없음)
"""

from __future__ import annotations

import pytest

from src.schemas.google_play_schema import (
    AppDetailQuery,
    DataSafetyQuery,
    DeveloperAppsQuery,
    ListQuery,
    PermissionsQuery,
    ReviewsQuery,
    SearchQuery,
    SimilarQuery,
    SuggestQuery,
)
from src.services.impl.google_play_service import GooglePlayService
from tests.fixtures import APP_DETAIL, PERMISSIONS, SEARCH_RESULTS


class TestForwarding:
    @pytest.mark.asyncio
    async def test_search_returns_provider_result_unchanged(self, fake_provider):
        service = GooglePlayService(fake_provider)

        result = await service.search_apps(SearchQuery(term="clash", num=5, full_detail=False, price="all"))

        assert result is SEARCH_RESULTS
        assert fake_provider.last_call == (
            "search",
            ("clash",),
            {"num": 5, "country": None, "lang": None, "full_detail": False, "price": "all"},
        )

    @pytest.mark.asyncio
    async def test_app_details(self, fake_provider):
        service = GooglePlayService(fake_provider)

        result = await service.get_app_details("com.supercell.clashofclans", AppDetailQuery(country="us"))

        assert result is APP_DETAIL
        assert fake_provider.last_call == ("app", ("com.supercell.clashofclans",), {"country": "us", "lang": None})

    @pytest.mark.asyncio
    async def test_developer_list_similar(self, fake_provider):
        service = GooglePlayService(fake_provider)

        await service.get_developer_apps("Supercell", DeveloperAppsQuery(num=2))
        assert fake_provider.last_call[0:2] == ("developer", ("Supercell",))

        await service.list_apps(ListQuery(collection="TOP_PAID", category="GAME"))
        assert fake_provider.last_call[2]["collection"] == "TOP_PAID"
        assert fake_provider.last_call[2]["category"] == "GAME"

        await service.get_similar_apps("com.example", SimilarQuery(full_detail=True))
        assert fake_provider.last_call == (
            "similar", ("com.example",), {"country": None, "lang": None, "full_detail": True}
        )

    @pytest.mark.asyncio
    async def test_reviews_permissions_data_safety_suggest(self, fake_provider):
        service = GooglePlayService(fake_provider)

        reviews = await service.get_app_reviews(
            "com.example", ReviewsQuery(sort=2, paginate=True, next_pagination_token="tok-1")
        )
        assert reviews["nextPaginationToken"] == "tok-2"
        assert fake_provider.last_call[2]["next_pagination_token"] == "tok-1"

        assert await service.get_app_permissions("com.example", PermissionsQuery(short=False)) is PERMISSIONS
        assert fake_provider.last_call[2] == {"lang": None, "short": False}

        await service.get_app_data_safety("com.example", DataSafetyQuery(lang="ko"))
        assert fake_provider.last_call == ("data_safety", ("com.example",), {"lang": "ko"})

        suggestions = await service.suggest_apps("clash", SuggestQuery())
        assert suggestions == ["clash of clans", "clash royale"]


class TestVocabularyListing:
    def test_listing_returns_key_value_pairs(self, fake_provider):
        service = GooglePlayService(fake_provider)

        assert service.get_collections() == {"TOP_FREE": "TOP_FREE", "TOP_PAID": "TOP_PAID", "GROSSING": "GROSSING"}
        assert service.get_categories()["GAME_ACTION"] == "GAME_ACTION"
        assert service.get_sort_options() == {"HELPFULNESS": 1, "NEWEST": 2, "RATING": 3}


class TestErrorPropagation:
    @pytest.mark.asyncio
    async def test_provider_error_propagates_once(self, provider_factory):
        provider = provider_factory(error=ConnectionError("network down"))
        service = GooglePlayService(provider)

        with pytest.raises(ConnectionError):
            await service.search_apps(SearchQuery(term="clash"))

        assert len(provider.calls) == 1
