"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


CRAWL_MODES = ("log", "persist")


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 서버
    host: str = "0.0.0.0"
    port: int = 3000

    # 데이터베이스 (persist 모드에서만 사용)
    database_url: str = "sqlite:///./game_crawler.db"

    # 스토어 데이터 제공자
    store_provider_backend: str = "google_play_scraper"
    store_default_country: str = "us"
    store_default_lang: str = "en"

    # 주기 크롤링
    # - crawl_mode: "log"는 결과 건수만 로그, "persist"는 app_records 테이블에 저장
    # - crawl_allow_overlap: False면 이전 실행이 끝나지 않은 tick은 건너뜀
    crawl_enabled: bool = True
    crawl_mode: str = "log"
    crawl_interval_seconds: float = 86400
    crawl_allow_overlap: bool = False
    crawl_term: str = "top free games"
    crawl_num: int = 10
    crawl_country: str = "us"
    crawl_lang: str = "en"

    # API
    api_title: str = "Game Crawler Data Service"
    api_version: str = "1.0.0"
    api_description: str = "API documentation for Google Play crawler"

    # 로깅
    log_level: str = "INFO"

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("port must be positive")
        return v

    @field_validator("crawl_interval_seconds")
    @classmethod
    def validate_crawl_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("crawl_interval_seconds must be positive")
        return v

    @field_validator("crawl_num")
    @classmethod
    def validate_crawl_num(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("crawl_num must be positive")
        return v

    @field_validator("crawl_mode")
    @classmethod
    def validate_crawl_mode(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in CRAWL_MODES:
            raise ValueError(f"crawl_mode must be one of: {', '.join(CRAWL_MODES)}")
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v:
            raise ValueError("database_url must not be empty")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
