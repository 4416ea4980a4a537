"""Enum 어휘 해석

자유 형식 문자열을 제공자 상수로 변환한다. 규칙은 순서대로 적용되며 먼저 맞는 것이 이긴다:
  1. 키 정확히 일치
  2. 정규화 (하이픈/공백 → 언더스코어, 대문자) 후 키 일치
  3. 값 비교 (문자열 값은 대소문자 무시, 숫자 값은 문자열 형태 정확히 일치)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from src.core.exceptions import InvalidEnumException


PRICE_OPTIONS: Mapping[str, str] = MappingProxyType({
    "all": "all",
    "free": "free",
    "paid": "paid",
})

_SEPARATORS = re.compile(r"[-\s]")


def normalize_enum_key(value: str) -> str:
    """'top-free', 'top free' → 'TOP_FREE'"""
    return _SEPARATORS.sub("_", value).upper()


def resolve_enum(vocabulary: Mapping[str, Any], value: Optional[str], field: str) -> Any:
    """어휘에서 value에 해당하는 제공자 상수를 찾는다

    Args:
        vocabulary: 키 → 제공자 값 (삽입 순서 유지)
        value: 요청 원문 (None/빈 문자열이면 미지정)
        field: 오류 메시지에 쓸 필드명

    Returns:
        매핑된 값, 미지정이면 None

    Raises:
        InvalidEnumException: 세 규칙 모두 실패
    """
    if not value:
        return None

    if value in vocabulary:
        return vocabulary[value]

    normalized = normalize_enum_key(value)
    if normalized in vocabulary:
        return vocabulary[normalized]

    lowered = value.lower()
    for enum_value in vocabulary.values():
        # bool은 int의 하위 타입이지만 어휘 값으로 쓰이지 않음
        if isinstance(enum_value, str):
            if enum_value.upper() == normalized or enum_value.lower() == lowered:
                return enum_value
        elif isinstance(enum_value, (int, float)) and not isinstance(enum_value, bool):
            if str(enum_value) == value:
                return enum_value

    raise InvalidEnumException(field, value, vocabulary.keys())


@dataclass(frozen=True)
class Vocabularies:
    """프로세스 전역 읽기 전용 어휘 묶음 (시작 시 제공자에서 1회 로드)"""

    collections: Mapping[str, Any]
    categories: Mapping[str, Any]
    sort: Mapping[str, Any]
    price: Mapping[str, Any] = field(default_factory=lambda: PRICE_OPTIONS)

    @classmethod
    def from_provider(cls, provider: Any) -> "Vocabularies":
        return cls(
            collections=MappingProxyType(dict(provider.collections())),
            categories=MappingProxyType(dict(provider.categories())),
            sort=MappingProxyType(dict(provider.sort_options())),
        )
