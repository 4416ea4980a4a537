"""쿼리 파라미터 검증/변환

모든 입력은 문자열(또는 None)로 들어온다. 실패는 전부 ValidationException 계열이며
라우트 계층에서 HTTP 400으로 변환된다. 제공자 호출 전에 검증을 끝낸다.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional, Union

from src.core.exceptions import (
    InvalidBooleanException,
    InvalidNumberException,
    RequiredParameterException,
)
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
from src.utils.enum_resolver import Vocabularies, resolve_enum

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")


def parse_number(value: Optional[str], field: str) -> Optional[Union[int, float]]:
    """'25' → 25, '2.5' → 2.5, None/'' → None"""
    if value is None or value == "":
        return None

    text = value.strip()
    # int()/float()는 "1_000" 같은 자릿수 구분자도 받아들임
    if "_" in text:
        raise InvalidNumberException(field, value)

    try:
        return int(text)
    except ValueError:
        pass

    try:
        parsed = float(text)
    except ValueError:
        raise InvalidNumberException(field, value) from None

    if not math.isfinite(parsed):
        raise InvalidNumberException(field, value)
    return parsed


def parse_boolean(value: Optional[str], field: str) -> Optional[bool]:
    """true/1 → True, false/0 → False (대소문자 무시), None/'' → None"""
    if value is None or value == "":
        return None

    normalized = value.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidBooleanException(field, value)


def required_param(value: Optional[str], field: str, message: Optional[str] = None) -> str:
    """trim 후 비어 있으면 RequiredParameterException"""
    trimmed = value.strip() if value is not None else ""
    if not trimmed:
        raise RequiredParameterException(field, message)
    return trimmed


def optional_string(value: Optional[str]) -> Optional[str]:
    """trim 후 비어 있으면 None"""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def required_term(value: Optional[str]) -> str:
    return required_param(value, "term", "term query parameter is required")


class QueryParser:
    """라우트별 파라미터 → 쿼리 스키마 변환기

    Args:
        vocabularies: 제공자에서 로드한 어휘 (enum 해석에 사용)

    각 메서드는 (path_params, query_params)를 받아 검증된 쿼리 묶음을 반환한다.
    """

    def __init__(self, vocabularies: Vocabularies):
        self.vocabularies = vocabularies

    def search(self, path: Mapping[str, str], query: Mapping[str, str]) -> SearchQuery:
        term = required_term(query.get("term"))
        return SearchQuery(
            term=term,
            num=parse_number(query.get("num"), "num"),
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
            full_detail=parse_boolean(query.get("fullDetail"), "fullDetail"),
            price=resolve_enum(self.vocabularies.price, query.get("price"), "price"),
        )

    def app_detail(self, path: Mapping[str, str], query: Mapping[str, str]) -> tuple[str, AppDetailQuery]:
        return required_param(path.get("appId"), "appId"), AppDetailQuery(
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
        )

    def developer_apps(
        self, path: Mapping[str, str], query: Mapping[str, str]
    ) -> tuple[str, DeveloperAppsQuery]:
        return required_param(path.get("devId"), "devId"), DeveloperAppsQuery(
            num=parse_number(query.get("num"), "num"),
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
            full_detail=parse_boolean(query.get("fullDetail"), "fullDetail"),
        )

    def list_apps(self, path: Mapping[str, str], query: Mapping[str, str]) -> ListQuery:
        collections = self.vocabularies.collections
        collection = resolve_enum(collections, query.get("collection"), "collection")
        if collection is None:
            collection = collections.get("TOP_FREE")

        return ListQuery(
            collection=collection,
            category=resolve_enum(self.vocabularies.categories, query.get("category"), "category"),
            num=parse_number(query.get("num"), "num"),
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
            full_detail=parse_boolean(query.get("fullDetail"), "fullDetail"),
        )

    def reviews(self, path: Mapping[str, str], query: Mapping[str, str]) -> tuple[str, ReviewsQuery]:
        app_id = required_param(path.get("appId"), "appId")
        return app_id, ReviewsQuery(
            sort=resolve_enum(self.vocabularies.sort, query.get("sort"), "sort"),
            num=parse_number(query.get("num"), "num"),
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
            paginate=parse_boolean(query.get("paginate"), "paginate"),
            next_pagination_token=optional_string(query.get("nextPaginationToken")),
        )

    def similar(self, path: Mapping[str, str], query: Mapping[str, str]) -> tuple[str, SimilarQuery]:
        return required_param(path.get("appId"), "appId"), SimilarQuery(
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
            full_detail=parse_boolean(query.get("fullDetail"), "fullDetail"),
        )

    def permissions(self, path: Mapping[str, str], query: Mapping[str, str]) -> tuple[str, PermissionsQuery]:
        return required_param(path.get("appId"), "appId"), PermissionsQuery(
            lang=optional_string(query.get("lang")),
            short=parse_boolean(query.get("short"), "short"),
        )

    def data_safety(self, path: Mapping[str, str], query: Mapping[str, str]) -> tuple[str, DataSafetyQuery]:
        return required_param(path.get("appId"), "appId"), DataSafetyQuery(
            lang=optional_string(query.get("lang")),
        )

    def suggest(self, path: Mapping[str, str], query: Mapping[str, str]) -> tuple[str, SuggestQuery]:
        return required_term(query.get("term")), SuggestQuery(
            country=optional_string(query.get("country")),
            lang=optional_string(query.get("lang")),
        )

    def no_params(self, path: Mapping[str, str], query: Mapping[str, str]) -> None:
        """목록 조회 라우트 (검증 없음)"""
        return None
