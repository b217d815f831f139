"""KPI 요약 모듈."""

from __future__ import annotations

from typing import Sequence

from ..domain.calendar import month_short
from ..domain.models import ChartPoint, KPISummary, MonthlyBucket

# 기간 라벨을 만들 수 없을 때 표시하는 값
RANGE_PLACEHOLDER = "—"


def range_label(buckets: Sequence[MonthlyBucket]) -> str:
    """
    "Jan 2023 → Dec 2024" 형식의 기간 라벨.

    버킷이 2개 미만이면 "—"를 반환합니다. 표시 전용 문자열입니다.
    """
    if len(buckets) < 2:
        return RANGE_PLACEHOLDER
    first, last = buckets[0], buckets[-1]
    return (
        f"{month_short(first.month)} {first.year} → "
        f"{month_short(last.month)} {last.year}"
    )


def summarize(points: Sequence[ChartPoint], buckets: Sequence[MonthlyBucket]) -> KPISummary:
    """
    차트 지점으로부터 합계/평균/최근값/기간 라벨을 계산합니다.

    Args:
        points: project_metric 결과 (시간순)
        buckets: points의 원천 버킷 (기간 라벨 계산용)

    Returns:
        KPISummary. 지점이 없으면 sum/average/latest 모두 0.
    """
    values = [p.value for p in points]
    total = float(sum(values))
    average = total / len(values) if values else 0.0
    latest = float(values[-1]) if values else 0.0
    return KPISummary(
        sum=total,
        average=average,
        latest=latest,
        range_label=range_label(buckets),
    )
