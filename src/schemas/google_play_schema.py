"""Pydantic 스키마 정의 - 요청별 쿼리 파라미터 묶음

라우트 계층에서 문자열 파라미터를 검증/변환한 결과를 담는다.
모든 선택 필드는 None이면 "미지정"이며 제공자 기본값을 따른다.
"""
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, Field


Number = Union[int, float]


class SearchQuery(BaseModel):
    """앱 검색"""
    term: str = Field(..., min_length=1, description="검색어")
    num: Optional[Number] = Field(None, description="최대 결과 수")
    country: Optional[str] = Field(None, description="두 글자 국가 코드")
    lang: Optional[str] = Field(None, description="두 글자 언어 코드")
    full_detail: Optional[bool] = Field(None, description="상세 정보 포함 여부")
    price: Optional[str] = Field(None, description="all | free | paid")


class AppDetailQuery(BaseModel):
    """앱 상세"""
    country: Optional[str] = None
    lang: Optional[str] = None


class DeveloperAppsQuery(BaseModel):
    """개발자 앱 목록"""
    num: Optional[Number] = None
    country: Optional[str] = None
    lang: Optional[str] = None
    full_detail: Optional[bool] = None


class ListQuery(BaseModel):
    """컬렉션/카테고리 목록"""
    collection: Any = Field(..., description="제공자 컬렉션 상수")
    category: Any = Field(None, description="제공자 카테고리 상수")
    num: Optional[Number] = None
    country: Optional[str] = None
    lang: Optional[str] = None
    full_detail: Optional[bool] = None


class ReviewsQuery(BaseModel):
    """리뷰 목록"""
    sort: Any = Field(None, description="제공자 정렬 상수")
    num: Optional[Number] = None
    country: Optional[str] = None
    lang: Optional[str] = None
    paginate: Optional[bool] = None
    next_pagination_token: Optional[str] = None


class SimilarQuery(BaseModel):
    """유사 앱"""
    country: Optional[str] = None
    lang: Optional[str] = None
    full_detail: Optional[bool] = None


class PermissionsQuery(BaseModel):
    """권한 목록"""
    lang: Optional[str] = None
    short: Optional[bool] = None


class DataSafetyQuery(BaseModel):
    """데이터 보안 정보"""
    lang: Optional[str] = None


class SuggestQuery(BaseModel):
    """자동완성"""
    country: Optional[str] = None
    lang: Optional[str] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str = Field(..., description="ok | degraded")
    timestamp: datetime
    version: str
    database: Optional[bool] = Field(None, description="persist 모드일 때만 DB 연결 상태")
    scheduler: bool = Field(..., description="크롤 스케줄러 실행 여부")
