"""
도메인 계층 퍼블릭 API

도메인 모델, 예외, 정규화 함수를 재수출합니다.
"""
from __future__ import annotations

from .calendar import month_name, month_short
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    DataLoadError,
    DomainError,
    FetchCancelled,
    VoteWriteError,
)
from .models import (
    METRIC_LABELS,
    METRIC_RETAIL,
    METRIC_TOTAL,
    METRIC_WAREHOUSE,
    METRICS,
    STANCE_AGAINST,
    STANCE_SUPPORT,
    AuthIdentity,
    ChartPoint,
    KPISummary,
    MonthlyBucket,
    RawRecord,
    VoteContext,
    VoteRecord,
)
from .normalization import normalize_rows, parse_int, records_to_frame, safe_number

__all__ = [
    # 예외
    "DomainError",
    "DataLoadError",
    "FetchCancelled",
    "AuthenticationError",
    "VoteWriteError",
    "ConfigurationError",
    # 모델
    "RawRecord",
    "MonthlyBucket",
    "ChartPoint",
    "KPISummary",
    "AuthIdentity",
    "VoteRecord",
    "VoteContext",
    # 지표/입장
    "METRICS",
    "METRIC_LABELS",
    "METRIC_TOTAL",
    "METRIC_RETAIL",
    "METRIC_WAREHOUSE",
    "STANCE_SUPPORT",
    "STANCE_AGAINST",
    # 정규화
    "normalize_rows",
    "records_to_frame",
    "safe_number",
    "parse_int",
    # 라벨
    "month_name",
    "month_short",
]
