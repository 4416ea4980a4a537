"""Google Play Routes - 명시적 라우트 테이블

(GET, path) → (parser, handler) 매핑을 ROUTES에 선언하고 APIRouter에 등록한다.
라우트 계층은 검증 → 서비스 호출 → 결과 반환만 수행하는 Translator 역할이다.
검증 실패(ValidationException)는 서비스 호출 전에 발생하며 400으로 변환된다.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, Request

from src.core.logging import logger
from src.services.impl.google_play_service import GooglePlayService
from src.utils.query_params import QueryParser

router = APIRouter(prefix="/google-play", tags=["google-play"])

# 싱글톤 서비스
_google_play_service: Optional[GooglePlayService] = None


def get_google_play_service() -> GooglePlayService:
    """GooglePlayService 싱글톤 (첫 요청 시 제공자/어휘 로드)"""
    global _google_play_service
    if _google_play_service is None:
        _google_play_service = GooglePlayService()
    return _google_play_service


@dataclass(frozen=True)
class ParamDoc:
    """OpenAPI 문서용 파라미터 설명"""
    name: str
    description: str
    location: str = "query"
    required: bool = False
    type: str = "string"

    def to_openapi(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "in": self.location,
            "required": self.required or self.location == "path",
            "description": self.description,
            "schema": {"type": self.type},
        }


@dataclass(frozen=True)
class RouteEntry:
    """라우트 테이블 항목

    parse: (QueryParser, path_params, query_params) → 검증된 파라미터
    handle: (GooglePlayService, 파라미터) → 결과 (동기/비동기 모두 허용)
    """
    path: str
    name: str
    summary: str
    parse: Callable[[QueryParser, Any, Any], Any]
    handle: Callable[[GooglePlayService, Any], Any]
    params: tuple[ParamDoc, ...] = ()
    # 기본 백엔드(google_play_scraper)가 지원하지 않아 501이 될 수 있는 라우트
    may_be_unsupported: bool = False


COUNTRY = ParamDoc("country", "Two letter country code")
LANG = ParamDoc("lang", "Two letter language code")
NUM = ParamDoc("num", "Maximum number of results", type="number")
FULL_DETAIL = ParamDoc("fullDetail", "Return full app detail", type="boolean")
APP_ID = ParamDoc("appId", "Unique application id (e.g. com.supercell.clashofclans)", location="path")

UNSUPPORTED_RESPONSES: dict[int, dict[str, Any]] = {
    501: {"description": "Not supported by the configured provider backend (STORE_PROVIDER_BACKEND)"},
}


ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry(
        "/search", "search", "Search apps on Google Play by term",
        QueryParser.search,
        lambda service, q: service.search_apps(q),
        (ParamDoc("term", "Search keyword", required=True), NUM, COUNTRY, LANG, FULL_DETAIL,
         ParamDoc("price", "Filter by price: all | free | paid")),
    ),
    RouteEntry(
        "/apps/{appId}", "get_app_detail", "Retrieve app detail from Google Play",
        QueryParser.app_detail,
        lambda service, args: service.get_app_details(*args),
        (APP_ID, COUNTRY, LANG),
    ),
    RouteEntry(
        "/developers/{devId}/apps", "get_developer_apps", "List apps by developer id",
        QueryParser.developer_apps,
        lambda service, args: service.get_developer_apps(*args),
        (ParamDoc("devId", "Developer id as shown in play.google.com/store/apps/dev?id=", location="path"),
         NUM, COUNTRY, LANG, FULL_DETAIL),
        may_be_unsupported=True,
    ),
    RouteEntry(
        "/list", "list_apps", "Browse curated lists (top free, top paid, etc.)",
        QueryParser.list_apps,
        lambda service, q: service.list_apps(q),
        (ParamDoc("collection", "Collection key to retrieve (default TOP_FREE)"),
         ParamDoc("category", "App category filter"), NUM, COUNTRY, LANG, FULL_DETAIL),
        may_be_unsupported=True,
    ),
    RouteEntry(
        "/apps/{appId}/reviews", "get_app_reviews", "Retrieve store reviews for an app",
        QueryParser.reviews,
        lambda service, args: service.get_app_reviews(*args),
        (APP_ID, ParamDoc("sort", "Sort order for reviews"),
         ParamDoc("num", "Number of reviews to fetch", type="number"), COUNTRY, LANG,
         ParamDoc("paginate", "Enable pagination tokens in response", type="boolean"),
         ParamDoc("nextPaginationToken", "Token returned by a previous reviews call")),
    ),
    RouteEntry(
        "/apps/{appId}/similar", "get_similar_apps", "Find similar apps to the given app id",
        QueryParser.similar,
        lambda service, args: service.get_similar_apps(*args),
        (APP_ID, COUNTRY, LANG, FULL_DETAIL),
        may_be_unsupported=True,
    ),
    RouteEntry(
        "/apps/{appId}/permissions", "get_app_permissions", "List permissions requested by an app",
        QueryParser.permissions,
        lambda service, args: service.get_app_permissions(*args),
        (APP_ID, LANG,
         ParamDoc("short", "When set to true, returns a flat list of permission strings", type="boolean")),
    ),
    RouteEntry(
        "/apps/{appId}/data-safety", "get_app_data_safety", "Fetch declared data safety information for an app",
        QueryParser.data_safety,
        lambda service, args: service.get_app_data_safety(*args),
        (APP_ID, LANG),
        may_be_unsupported=True,
    ),
    RouteEntry(
        "/suggest", "suggest", "Retrieve autocomplete suggestions based on a search term",
        QueryParser.suggest,
        lambda service, args: service.suggest_apps(*args),
        (ParamDoc("term", "Partial search term", required=True), COUNTRY, LANG),
        may_be_unsupported=True,
    ),
    RouteEntry(
        "/collections", "get_collections", "List available collection constants",
        QueryParser.no_params,
        lambda service, _: service.get_collections(),
    ),
    RouteEntry(
        "/categories", "get_categories", "List available category constants",
        QueryParser.no_params,
        lambda service, _: service.get_categories(),
    ),
    RouteEntry(
        "/reviews/sort-options", "get_review_sort_options", "List available review sort constants",
        QueryParser.no_params,
        lambda service, _: service.get_sort_options(),
    ),
)


def _make_endpoint(route: RouteEntry) -> Callable[..., Any]:
    async def endpoint(
        request: Request,
        service: GooglePlayService = Depends(get_google_play_service),
    ):
        parser = QueryParser(service.vocabularies)
        params = route.parse(parser, request.path_params, request.query_params)

        logger.debug(f"[API] {route.name}: path={dict(request.path_params)}")
        result = route.handle(service, params)
        if inspect.isawaitable(result):
            result = await result
        return result

    endpoint.__name__ = route.name
    return endpoint


def register_routes(api_router: APIRouter, routes: tuple[RouteEntry, ...] = ROUTES) -> APIRouter:
    """라우트 테이블을 APIRouter에 등록"""
    for route in routes:
        api_router.add_api_route(
            route.path,
            _make_endpoint(route),
            methods=["GET"],
            name=route.name,
            summary=route.summary,
            responses=UNSUPPORTED_RESPONSES if route.may_be_unsupported else None,
            openapi_extra={"parameters": [p.to_openapi() for p in route.params]} if route.params else None,
        )
    return api_router


register_routes(router)
