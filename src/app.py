"""FastAPI 앱 팩토리"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from src.core.config import settings
from src.core.database import init_db
from src.core.logging import logger
from src.api import (
    health_router,
    google_play_router,
    get_google_play_service,
    register_exception_handlers,
)
from src.scheduler.crawl_scheduler import CrawlScheduler, GooglePlayCrawlJob


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    app.state.crawl_scheduler = None

    if settings.crawl_mode == "persist":
        init_db()

    if settings.crawl_enabled:
        job = GooglePlayCrawlJob(get_google_play_service())
        app.state.crawl_scheduler = CrawlScheduler(job).start()

    logger.info(f"Application started (port={settings.port})")
    yield
    logger.info("Shutting down application...")
    if app.state.crawl_scheduler is not None:
        app.state.crawl_scheduler.shutdown()


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url="/api/docs",
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(google_play_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
