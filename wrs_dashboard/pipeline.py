"""End-to-end orchestration for the monthly sales view.

집계 → 지표 투영 → KPI 요약을 순서대로 실행합니다. 각 단계는 st.cache_data로
캐시되어, 카테고리/지표와 무관한 재실행(예: 투표 버튼 클릭)에서는 이전 결과를
재사용합니다. 분석 함수 자체(analytics)는 Streamlit에 의존하지 않습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import streamlit as st

from .analytics import aggregate_monthly, project_metric, summarize
from .common import measure_time_context
from .core.config import ALL_CATEGORIES
from .domain.models import METRIC_TOTAL, ChartPoint, KPISummary, MonthlyBucket, RawRecord

logger = logging.getLogger(__name__)

# 카테고리/지표 조합 수만큼만 보관
_CACHE_ENTRIES = 64


@st.cache_data(show_spinner=False, max_entries=_CACHE_ENTRIES)
def _monthly_buckets(rows: Sequence[RawRecord], category: str) -> List[MonthlyBucket]:
    return aggregate_monthly(rows, category=category)


@st.cache_data(show_spinner=False, max_entries=_CACHE_ENTRIES)
def _chart_points(buckets: Sequence[MonthlyBucket], metric: str) -> List[ChartPoint]:
    return project_metric(buckets, metric=metric)


@st.cache_data(show_spinner=False, max_entries=_CACHE_ENTRIES)
def _kpi_summary(
    points: Sequence[ChartPoint], buckets: Sequence[MonthlyBucket]
) -> KPISummary:
    return summarize(points, buckets)


@dataclass(frozen=True)
class DashboardView:
    buckets: List[MonthlyBucket]
    points: List[ChartPoint]
    kpis: KPISummary


def build_dashboard_view(
    rows: Sequence[RawRecord],
    *,
    category: str = ALL_CATEGORIES,
    metric: str = METRIC_TOTAL,
) -> DashboardView:
    """
    현재 선택 상태로 화면에 필요한 파생 데이터를 계산합니다.

    Args:
        rows: 조회된 RawRecord 목록
        category: 카테고리 필터 또는 "ALL"
        metric: "total" | "retail" | "warehouse"

    Returns:
        DashboardView (buckets, points, kpis)
    """
    with measure_time_context("Monthly view build"):
        buckets = _monthly_buckets(list(rows), category)
        points = _chart_points(buckets, metric)
        kpis = _kpi_summary(points, buckets)

    logger.debug(
        f"View built: category={category}, metric={metric}, "
        f"{len(rows)} rows → {len(buckets)} buckets"
    )
    return DashboardView(buckets=buckets, points=points, kpis=kpis)


def clear_view_cache() -> None:
    """파생 데이터 캐시를 비웁니다 (데이터 새로고침 시 사용)."""
    _monthly_buckets.clear()
    _chart_points.clear()
    _kpi_summary.clear()
