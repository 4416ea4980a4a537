"""AppRecordRepository 테스트 (SQLite in-memory)"""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.core.database import Base
from src.core.exceptions import DatabaseException
from src.repositories.impl.app_record_repository import AppRecordRepository
from src.repositories.models import AppRecord
from tests.fixtures import SEARCH_RESULTS


@pytest.fixture
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


def test_create_maps_provider_item():
    record = AppRecordRepository.create(SEARCH_RESULTS[0])

    assert record.app_id == "com.supercell.clashofclans"
    assert record.title == "Clash of Clans"
    assert record.developer == "Supercell"
    assert record.score == 4.5


def test_create_keeps_missing_score_null():
    record = AppRecordRepository.create(SEARCH_RESULTS[2])
    assert record.score is None


def test_save_all_sets_id_and_timestamp(session_factory):
    db = session_factory()
    repo = AppRecordRepository(db)

    saved = repo.save_all(AppRecordRepository.create(item) for item in SEARCH_RESULTS)

    assert len(saved) == 3
    stored = db.get(AppRecord, saved[0].id)
    assert stored is not None
    assert stored.crawled_at is not None
    db.close()


def test_repeated_runs_append_duplicates(session_factory):
    db = session_factory()
    repo = AppRecordRepository(db)

    repo.save_all([AppRecordRepository.create(SEARCH_RESULTS[0])])
    repo.save_all([AppRecordRepository.create(SEARCH_RESULTS[0])])

    assert db.query(AppRecord).filter(AppRecord.app_id == "com.supercell.clashofclans").count() == 2
    assert db.query(AppRecord).count() == 2
    db.close()


def test_repository_exposes_insert_only_api():
    public = {name for name in vars(AppRecordRepository) if not name.startswith("_")}
    assert public == {"create", "save_all"}


def test_save_failure_rolls_back(session_factory):
    db = session_factory()
    repo = AppRecordRepository(db)

    # title NOT NULL 위반
    broken = AppRecord(app_id="x", title=None, developer="d")
    with pytest.raises(DatabaseException):
        repo.save_all([broken])

    assert db.query(AppRecord).count() == 0
    db.close()
