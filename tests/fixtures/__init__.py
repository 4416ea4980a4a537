"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 네트워크 의존 없음
"""

from .google_play import APP_DETAIL, SEARCH_RESULTS, REVIEWS, PERMISSIONS

__all__ = [
    "APP_DETAIL",
    "SEARCH_RESULTS",
    "REVIEWS",
    "PERMISSIONS",
]
