"""Google Play 주기 크롤링 스케줄러

- tick마다 고정 검색 1회 실행 → log 모드는 결과 로그, persist 모드는 app_records에 저장
- 실패는 로그만 남기고 삼킨다 (스케줄러/프로세스를 멈추지 않음, 재시도 없음)
- allow_overlap=False면 이전 실행이 끝나지 않은 tick은 건너뛴다 (max_instances=1)
"""

import asyncio
from typing import Any, Callable, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.orm import Session

from src.core.config import settings
from src.core.database import SessionLocal
from src.core.logging import logger, truncate_for_log
from src.repositories.impl.app_record_repository import AppRecordRepository
from src.schemas.google_play_schema import SearchQuery
from src.services.impl.google_play_service import GooglePlayService

# 겹침 허용 시 동시 실행 상한
OVERLAP_MAX_INSTANCES = 16


class GooglePlayCrawlJob:
    """고정 검색어 크롤 작업 (Idle ↔ Running)"""

    def __init__(
        self,
        service: GooglePlayService,
        mode: Optional[str] = None,
        query: Optional[SearchQuery] = None,
        session_factory: Callable[[], Session] = SessionLocal,
    ):
        self.service = service
        self.mode = mode or settings.crawl_mode
        self.query = query or SearchQuery(
            term=settings.crawl_term,
            num=settings.crawl_num,
            country=settings.crawl_country,
            lang=settings.crawl_lang,
        )
        self.session_factory = session_factory

    async def run(self) -> dict[str, Any]:
        """크롤 1회 실행 (예외를 밖으로 던지지 않음)"""
        try:
            logger.info(f"[Scheduler] Starting Google Play crawl: term='{self.query.term}', mode={self.mode}")

            results = await self.service.search_apps(self.query)

            if self.mode == "persist":
                # 동기 DB 커밋이 이벤트 루프를 막지 않도록 워커 스레드에서 실행
                count = await asyncio.to_thread(self._persist, results)
                logger.info(f"[Scheduler] Saved {count} apps to database")
            else:
                count = len(results)
                logger.info(f"[Scheduler] Crawled {count} apps: {truncate_for_log(results)}")

            return {"status": "success", "mode": self.mode, "count": count}

        except Exception as e:
            logger.error(f"[Scheduler] Failed to crawl Google Play: {e}", exc_info=True)
            return {"status": "error", "error": str(e)}

    def _persist(self, results: list[dict[str, Any]]) -> int:
        db = self.session_factory()
        try:
            repo = AppRecordRepository(db)
            records = repo.save_all(AppRecordRepository.create(item) for item in results)
            return len(records)
        finally:
            db.close()


class CrawlScheduler:
    """AsyncIOScheduler 래퍼 (이벤트 루프 안에서 생성/시작해야 함)"""

    JOB_ID = "google_play_crawl"

    def __init__(
        self,
        job: GooglePlayCrawlJob,
        interval_seconds: Optional[float] = None,
        allow_overlap: Optional[bool] = None,
    ):
        self.job = job
        self.interval_seconds = interval_seconds or settings.crawl_interval_seconds
        self.allow_overlap = settings.crawl_allow_overlap if allow_overlap is None else allow_overlap

        self.scheduler = AsyncIOScheduler()
        self.scheduler.add_job(
            job.run,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=self.JOB_ID,
            name="Google Play Crawl",
            replace_existing=True,
            max_instances=OVERLAP_MAX_INSTANCES if self.allow_overlap else 1,
            coalesce=True,
        )

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def start(self) -> "CrawlScheduler":
        self.scheduler.start()
        logger.info(
            f"[Scheduler] Crawl job scheduled every {self.interval_seconds}s "
            f"(mode={self.job.mode}, allow_overlap={self.allow_overlap})"
        )
        return self

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("[Scheduler] Crawl scheduler stopped")


# 수동 테스트용
if __name__ == "__main__":
    result = asyncio.run(GooglePlayCrawlJob(GooglePlayService()).run())
    print(result)
