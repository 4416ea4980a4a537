"""예외 → HTTP 응답 변환

- ValidationException: 400 (클라이언트 입력 오류, WARNING 로그)
- ProviderUnsupportedException: 501
- 그 외 예외는 프레임워크 기본 동작(500)에 맡긴다
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.core.exceptions import ProviderUnsupportedException, ValidationException
from src.core.logging import logger


async def validation_exception_handler(request: Request, exc: ValidationException) -> JSONResponse:
    logger.warning(f"[API] Input validation failed: {request.url.path} {exc}")
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


async def provider_unsupported_handler(request: Request, exc: ProviderUnsupportedException) -> JSONResponse:
    logger.warning(f"[API] Unsupported provider operation: {exc}")
    return JSONResponse(
        status_code=501,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationException, validation_exception_handler)
    app.add_exception_handler(ProviderUnsupportedException, provider_unsupported_handler)
