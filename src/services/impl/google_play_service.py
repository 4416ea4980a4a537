"""Google Play 조회 서비스 - 제공자 pass-through 파사드

검증된 쿼리를 제공자에 그대로 넘기고 결과를 가공 없이 반환한다.
재시도/캐시 없음: 제공자 예외는 호출자(라우트/스케줄러)로 전파된다.
"""

from typing import Any, Mapping, Optional

from src.core.logging import logger
from src.providers import StoreDataProvider, create_provider
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
from src.utils.enum_resolver import Vocabularies


class GooglePlayService:
    """Google Play 조회 서비스"""

    def __init__(self, provider: Optional[StoreDataProvider] = None):
        """
        Args:
            provider: 스토어 데이터 제공자 (없으면 설정된 백엔드로 생성)
        """
        self.provider = provider if provider is not None else create_provider()
        self.vocabularies = Vocabularies.from_provider(self.provider)
        logger.info(
            f"[Service] Provider '{getattr(self.provider, 'name', type(self.provider).__name__)}' ready "
            f"(collections={len(self.vocabularies.collections)}, "
            f"categories={len(self.vocabularies.categories)}, sort={len(self.vocabularies.sort)})"
        )

    async def search_apps(self, query: SearchQuery) -> Any:
        return await self.provider.search(
            query.term,
            num=query.num,
            country=query.country,
            lang=query.lang,
            full_detail=query.full_detail,
            price=query.price,
        )

    async def get_app_details(self, app_id: str, query: AppDetailQuery) -> Any:
        return await self.provider.app(app_id, country=query.country, lang=query.lang)

    async def get_developer_apps(self, dev_id: str, query: DeveloperAppsQuery) -> Any:
        return await self.provider.developer(
            dev_id,
            num=query.num,
            country=query.country,
            lang=query.lang,
            full_detail=query.full_detail,
        )

    async def list_apps(self, query: ListQuery) -> Any:
        return await self.provider.list_apps(
            collection=query.collection,
            category=query.category,
            num=query.num,
            country=query.country,
            lang=query.lang,
            full_detail=query.full_detail,
        )

    async def get_app_reviews(self, app_id: str, query: ReviewsQuery) -> Any:
        return await self.provider.reviews(
            app_id,
            sort=query.sort,
            num=query.num,
            country=query.country,
            lang=query.lang,
            paginate=query.paginate,
            next_pagination_token=query.next_pagination_token,
        )

    async def get_similar_apps(self, app_id: str, query: SimilarQuery) -> Any:
        return await self.provider.similar(
            app_id,
            country=query.country,
            lang=query.lang,
            full_detail=query.full_detail,
        )

    async def get_app_permissions(self, app_id: str, query: PermissionsQuery) -> Any:
        return await self.provider.permissions(app_id, lang=query.lang, short=query.short)

    async def get_app_data_safety(self, app_id: str, query: DataSafetyQuery) -> Any:
        return await self.provider.data_safety(app_id, lang=query.lang)

    async def suggest_apps(self, term: str, query: SuggestQuery) -> Any:
        return await self.provider.suggest(term, country=query.country, lang=query.lang)

    def get_collections(self) -> Mapping[str, Any]:
        return dict(self.vocabularies.collections)

    def get_categories(self) -> Mapping[str, Any]:
        return dict(self.vocabularies.categories)

    def get_sort_options(self) -> Mapping[str, Any]:
        return dict(self.vocabularies.sort)
