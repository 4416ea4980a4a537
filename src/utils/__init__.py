"""Utilities package - 요청 파라미터 검증/변환 도구"""

from .enum_resolver import PRICE_OPTIONS, Vocabularies, normalize_enum_key, resolve_enum
from .query_params import (
    QueryParser,
    optional_string,
    parse_boolean,
    parse_number,
    required_param,
)

__all__ = [
    "PRICE_OPTIONS",
    "Vocabularies",
    "normalize_enum_key",
    "resolve_enum",
    "QueryParser",
    "optional_string",
    "parse_boolean",
    "parse_number",
    "required_param",
]
