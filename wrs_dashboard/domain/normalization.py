"""
서버 응답 정규화

Socrata는 집계 결과의 숫자 필드를 문자열로 돌려줍니다. 이 모듈은 각 필드를
방어적으로 파싱하여 RawRecord로 변환합니다. 한 행의 필드가 깨져 있어도
전체 조회는 실패하지 않습니다.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, List, Mapping

import pandas as pd

from ..core.config import UNKNOWN_CATEGORY
from .models import RawRecord

# 문자열 앞부분의 정수/실수 (parseInt / parseFloat 규칙)
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# RawRecord DataFrame 컬럼 순서
RAW_COLUMNS = ["year", "month", "category", "retail_sales", "warehouse_sales"]


def safe_number(value: Any) -> float:
    """
    값을 실수로 파싱합니다. 실패하거나 유한하지 않으면 0.

    Examples:
        >>> safe_number("12.5")
        12.5
        >>> safe_number("abc")
        0.0
        >>> safe_number(None)
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if match is None:
            return 0.0
        try:
            number = float(match.group(1))
        except ValueError:
            return 0.0
    return number if math.isfinite(number) else 0.0


def parse_int(value: Any) -> float:
    """
    앞부분의 정수를 파싱합니다. 실패하면 NaN을 반환합니다.

    NaN은 집계 단계에서 해당 행을 제외하는 표식으로 사용됩니다.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else math.nan
    match = _INT_PREFIX.match(str(value))
    if match is None:
        return math.nan
    return int(match.group(1))


def normalize_category(value: Any) -> str:
    text = str(value).strip() if value is not None else ""
    return text or UNKNOWN_CATEGORY


def normalize_row(row: Mapping[str, Any]) -> RawRecord:
    """Socrata 응답 1행을 RawRecord로 변환합니다."""
    return RawRecord(
        year=parse_int(row.get("calendar_year")),
        month=parse_int(row.get("cal_month_num")),
        category=normalize_category(row.get("item_type")),
        retail_sales=safe_number(row.get("retail_sales")),
        warehouse_sales=safe_number(row.get("warehouse_sales")),
    )


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> List[RawRecord]:
    """
    Socrata 응답 전체를 정규화합니다.

    dict가 아닌 항목은 건너뜁니다.

    Args:
        rows: JSON 배열을 파싱한 dict 목록

    Returns:
        RawRecord 리스트 (입력 순서 유지)
    """
    return [normalize_row(row) for row in rows if isinstance(row, Mapping)]


def records_to_frame(rows: Iterable[RawRecord]) -> pd.DataFrame:
    """RawRecord 목록을 RAW_COLUMNS 스키마의 DataFrame으로 변환합니다."""
    data = [
        (r.year, r.month, r.category, r.retail_sales, r.warehouse_sales)
        for r in rows
    ]
    return pd.DataFrame(data, columns=RAW_COLUMNS)
