"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Request
from datetime import datetime

from src.schemas.google_play_schema import HealthResponse
from src.core.config import settings
from src.core.database import engine
from src.core.logging import logger
from src import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 크롤 스케줄러 실행 여부
    - DB 연결 상태 (persist 모드에서만)
    """
    db_ok = None
    if settings.crawl_mode == "persist":
        try:
            with engine.connect() as connection:
                connection.exec_driver_sql("SELECT 1")
                db_ok = True
        except Exception as e:
            logger.error(f"Database connection error: {e}")
            db_ok = False

    crawl_scheduler = getattr(request.app.state, "crawl_scheduler", None)
    scheduler_ok = bool(crawl_scheduler and crawl_scheduler.running)

    return HealthResponse(
        status="degraded" if db_ok is False else "ok",
        timestamp=datetime.now(),
        version=__version__,
        database=db_ok,
        scheduler=scheduler_ok,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/api/docs",
    }
