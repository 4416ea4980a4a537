"""데이터베이스 모델"""
from sqlalchemy import Column, Integer, String, TIMESTAMP, Float, func
from src.core.database import Base


class AppRecord(Base):
    """주기 크롤링 스냅샷 테이블

    - 크롤 작업이 실행될 때마다 새 행을 추가한다 (app_id 중복 허용)
    - 생성 이후 수정/삭제하지 않는다
    """

    __tablename__ = "app_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    app_id = Column(String, nullable=False)
    title = Column(String, nullable=False)
    developer = Column(String, nullable=False)
    score = Column(Float, nullable=True)  # 제공자 평점 (없을 수 있음)
    crawled_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self) -> str:
        return f"<AppRecord(id={self.id}, app_id={self.app_id}, title={self.title})>"
