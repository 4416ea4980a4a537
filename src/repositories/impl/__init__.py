"""Repositories implementation package."""

from .app_record_repository import AppRecordRepository

__all__ = ["AppRecordRepository"]
