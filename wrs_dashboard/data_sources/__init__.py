"""
데이터 소스 계층

Socrata 집계 조회, 세션 상태 관리, 사용자별 세션 상태 저장소를 제공합니다.
"""

from .socrata import CancellationToken, build_query_params, fetch_sales_aggregates
from .storage import (
    SessionStateStore,
    load_identity,
    load_vote,
    save_identity,
    save_vote,
)

__all__ = [
    # 조회
    "CancellationToken",
    "build_query_params",
    "fetch_sales_aggregates",
    # 사용자별 상태
    "SessionStateStore",
    "load_identity",
    "save_identity",
    "load_vote",
    "save_vote",
]
