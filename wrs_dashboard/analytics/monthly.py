"""월별 집계 모듈.

서버 집계 행(연/월/카테고리)을 카테고리 필터 적용 후 (연, 월) 단위로 합산합니다.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from ..core.config import ALL_CATEGORIES
from ..domain.models import MonthlyBucket, RawRecord
from ..domain.normalization import records_to_frame

logger = logging.getLogger(__name__)

_SALES_COLUMNS = ["retail_sales", "warehouse_sales"]


def bucket_key(year: int, month: int) -> str:
    """(연, 월)을 "YYYY-MM" 키로 변환합니다."""
    return f"{year}-{month:02d}"


def aggregate_monthly(
    rows: Sequence[RawRecord],
    category: str = ALL_CATEGORIES,
) -> List[MonthlyBucket]:
    """
    행 목록을 (연, 월) 단위 월별 시계열로 합산합니다.

    처리 순서:
    1. category가 "ALL"이 아니면 해당 카테고리 행만 남김
    2. 연/월이 유한한 숫자가 아닌 행(NaN, None, inf)은 제외
    3. (연, 월)로 그룹화하여 소매/창고 판매량을 각각 합산
    4. (연, 월) 오름차순 정렬

    하위 단계(지표 투영, KPI, 차트)는 정렬된 순서를 그대로 사용하므로
    4단계의 정렬은 생략하면 안 됩니다.

    Args:
        rows: RawRecord 목록
        category: 카테고리 필터 또는 "ALL"

    Returns:
        MonthlyBucket 리스트. 입력이 비어 있으면 빈 리스트.

    Examples:
        >>> rows = [
        ...     RawRecord(2023, 1, "WINE", 100, 50),
        ...     RawRecord(2023, 1, "BEER", 20, 5),
        ... ]
        >>> aggregate_monthly(rows)[0].retail_sales
        120.0
    """
    frame = records_to_frame(rows)
    if frame.empty:
        return []

    # ========================================
    # 1단계: 카테고리 필터
    # ========================================
    if category != ALL_CATEGORIES:
        frame = frame[frame["category"] == category]

    # ========================================
    # 2단계: 연/월이 유효하지 않은 행 제외
    # ========================================
    years = pd.to_numeric(frame["year"], errors="coerce").astype(float)
    months = pd.to_numeric(frame["month"], errors="coerce").astype(float)
    finite = np.isfinite(years) & np.isfinite(months)

    dropped = int((~finite).sum())
    if dropped:
        logger.debug(f"Skipped {dropped} rows with non-finite year/month")

    frame = frame.loc[finite, _SALES_COLUMNS].copy()
    if frame.empty:
        return []
    frame["year"] = years[finite].astype(int)
    frame["month"] = months[finite].astype(int)
    for col in _SALES_COLUMNS:
        frame[col] = pd.to_numeric(frame[col], errors="coerce").fillna(0.0).astype(float)

    # ========================================
    # 3-4단계: (연, 월) 합산 및 정렬
    # ========================================
    grouped = (
        frame.groupby(["year", "month"], sort=True)[_SALES_COLUMNS]
        .sum()
        .reset_index()
        .sort_values(["year", "month"], kind="mergesort")
    )

    return [
        MonthlyBucket(
            key=bucket_key(int(row.year), int(row.month)),
            year=int(row.year),
            month=int(row.month),
            retail_sales=float(row.retail_sales),
            warehouse_sales=float(row.warehouse_sales),
        )
        for row in grouped.itertuples(index=False)
    ]


def category_options(rows: Iterable[RawRecord]) -> List[str]:
    """행에 등장하는 카테고리를 알파벳 순으로 중복 없이 반환합니다."""
    return sorted({r.category for r in rows})
