"""지표 투영 모듈.

월별 버킷을 선택된 지표(total / retail / warehouse)의 차트 지점으로 변환합니다.
"""

from __future__ import annotations

from typing import List, Sequence

from ..domain.calendar import month_name, month_short, year_suffix
from ..domain.models import METRIC_RETAIL, METRIC_WAREHOUSE, ChartPoint, MonthlyBucket


def metric_value(bucket: MonthlyBucket, metric: str) -> float:
    """버킷에서 지표 값을 선택합니다. 알 수 없는 지표는 total로 처리합니다."""
    if metric == METRIC_RETAIL:
        return bucket.retail_sales
    if metric == METRIC_WAREHOUSE:
        return bucket.warehouse_sales
    return bucket.total_sales


def point_labels(year: int, month: int) -> tuple[str, str]:
    """("Jan '24", "January 2024") 형식의 (짧은, 긴) 라벨을 반환합니다."""
    short = f"{month_short(month)} '{year_suffix(year)}"
    full = f"{month_name(month)} {year}"
    return short, full


def project_metric(buckets: Sequence[MonthlyBucket], metric: str) -> List[ChartPoint]:
    """
    버킷 목록을 차트 지점 목록으로 변환합니다.

    입력 순서와 개수를 그대로 유지하며 필터링/정렬을 하지 않습니다.

    Args:
        buckets: aggregate_monthly 결과 (시간순)
        metric: "total" | "retail" | "warehouse"

    Returns:
        ChartPoint 리스트
    """
    points: List[ChartPoint] = []
    for bucket in buckets:
        label, full_label = point_labels(bucket.year, bucket.month)
        points.append(
            ChartPoint(
                key=bucket.key,
                label=label,
                full_label=full_label,
                value=metric_value(bucket, metric),
            )
        )
    return points
