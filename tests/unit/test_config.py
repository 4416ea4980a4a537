"""Settings 검증 테스트"""

import pytest
from pydantic import ValidationError

from src.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "CRAWL_MODE", "CRAWL_ENABLED", "DATABASE_URL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.port == 3000
    assert s.crawl_mode == "log"
    assert s.crawl_enabled is True
    assert s.crawl_term == "top free games"
    assert s.crawl_num == 10
    assert s.store_provider_backend == "google_play_scraper"


def test_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_crawl_mode_normalized(monkeypatch):
    monkeypatch.setenv("CRAWL_MODE", " Persist ")
    assert Settings(_env_file=None).crawl_mode == "persist"


@pytest.mark.parametrize(
    "name, value",
    [
        ("PORT", "0"),
        ("CRAWL_INTERVAL_SECONDS", "-1"),
        ("CRAWL_NUM", "0"),
        ("CRAWL_MODE", "upsert"),
        ("DATABASE_URL", ""),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
