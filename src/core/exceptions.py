"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Iterable, Optional


# 기본 예외 클래스
class GameCrawlerException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 유효성 검증 관련 예외 (HTTP 400)
class ValidationException(GameCrawlerException):
    """유효성 검증 예외의 기본 클래스

    message는 클라이언트에 그대로 노출되므로 필드명을 포함한 문장으로 만든다.
    """
    def __init__(
        self,
        field: str,
        message: str,
        error_code: str = "VALIDATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.field = field
        super().__init__(message, error_code, details or {"field": field})


class RequiredParameterException(ValidationException):
    """필수 파라미터 누락"""
    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(field, message or f"{field} is required", "REQUIRED_PARAMETER")


class InvalidNumberException(ValidationException):
    """숫자로 변환할 수 없는 값"""
    def __init__(self, field: str, value: str):
        super().__init__(
            field,
            f"{field} must be a valid number",
            "INVALID_NUMBER",
            {"field": field, "value": value},
        )


class InvalidBooleanException(ValidationException):
    """true/false, 1/0 이외의 값"""
    def __init__(self, field: str, value: str):
        super().__init__(
            field,
            f"{field} must be either true/false or 1/0",
            "INVALID_BOOLEAN",
            {"field": field, "value": value},
        )


class InvalidEnumException(ValidationException):
    """어휘(vocabulary)에 없는 enum 값"""
    def __init__(self, field: str, value: str, valid_keys: Iterable[str]):
        keys = list(valid_keys)
        super().__init__(
            field,
            f"{field} must be one of: {', '.join(keys)}",
            "INVALID_ENUM",
            {"field": field, "value": value, "valid_keys": keys},
        )


# 스토어 데이터 제공자 관련 예외
class ProviderException(GameCrawlerException):
    """외부 스토어 데이터 제공자 예외의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "PROVIDER_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "PROVIDER_ERROR", details)


class ProviderUnsupportedException(ProviderException):
    """현재 백엔드가 제공하지 않는 작업 (HTTP 501)"""
    def __init__(self, operation: str, backend: str, details: Optional[dict[str, Any]] = None):
        message = f"Operation '{operation}' is not supported by provider backend '{backend}'"
        super().__init__(message, "PROVIDER_UNSUPPORTED",
                         details or {"operation": operation, "backend": backend})


# 데이터베이스 관련 예외
class DatabaseException(GameCrawlerException):
    """데이터베이스 관련 예외"""
    def __init__(self, message: str, error_code: str = "DB_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DB_ERROR", details)
