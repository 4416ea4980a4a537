"""크롤 스냅샷 리포지토리 - DB 접근 로직 (insert-only)"""
from typing import Any, Iterable, List, Mapping

from sqlalchemy.orm import Session

from src.repositories.models import AppRecord
from src.core.logging import logger
from src.core.exceptions import DatabaseException


class AppRecordRepository:
    """AppRecord 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def create(item: Mapping[str, Any]) -> AppRecord:
        """제공자 검색 결과 1건을 AppRecord로 매핑 (저장하지 않음)"""
        score = item.get("score")
        return AppRecord(
            app_id=item.get("appId") or "",
            title=item.get("title") or "",
            developer=item.get("developer") or "",
            score=float(score) if score is not None else None,
        )

    def save_all(self, records: Iterable[AppRecord]) -> List[AppRecord]:
        """여러 건을 한 트랜잭션으로 저장"""
        records = list(records)
        try:
            self.db.add_all(records)
            self.db.commit()
            logger.info(f"App records saved: {len(records)}")
            return records
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to save app records: {e}")
            raise DatabaseException(f"Failed to save app records: {e}")

