"""
Socrata 집계 조회

원본 약 30만 행을 내려받는 대신, 서버에서 (연, 월, 품목 유형) 단위로
소매/창고 판매량을 합산한 결과만 요청합니다.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from ..common.performance import measure_time_context
from ..core.config import CONFIG
from ..domain.exceptions import DataLoadError, FetchCancelled
from ..domain.models import RawRecord
from ..domain.normalization import normalize_rows

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    진행 중인 조회를 취소하기 위한 토큰.

    화면이 먼저 종료되면 cancel()을 호출하고, 조회 함수는 요청 전/응답 후에
    토큰을 확인하여 FetchCancelled를 던집니다. 취소된 조회 결과는 상태에 기록되지 않습니다.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise FetchCancelled("Data fetch cancelled")


def build_query_params(limit: int = CONFIG.fetch.row_limit) -> Dict[str, str]:
    """서버 측 그룹 합산 쿼리 파라미터 (SoQL)."""
    return {
        "$select": (
            "calendar_year,cal_month_num,item_type,"
            "sum(rtl_sales) as retail_sales,sum(whs_sales) as warehouse_sales"
        ),
        "$group": "calendar_year,cal_month_num,item_type",
        "$order": "calendar_year asc, cal_month_num asc, item_type asc",
        "$limit": str(int(limit)),
    }


def fetch_sales_aggregates(
    *,
    session: Optional[requests.Session] = None,
    endpoint: str = CONFIG.fetch.endpoint,
    limit: int = CONFIG.fetch.row_limit,
    timeout: float = CONFIG.fetch.timeout_seconds,
    cancel_token: Optional[CancellationToken] = None,
) -> List[RawRecord]:
    """
    Socrata에서 월/연/품목 유형별 집계 데이터를 한 번 조회합니다.

    재시도/백오프는 하지 않습니다.

    Args:
        session: 재사용할 requests.Session (None이면 requests.get 사용)
        endpoint: 리소스 URL
        limit: 최대 행 수
        timeout: HTTP 타임아웃 (초)
        cancel_token: 취소 토큰

    Returns:
        RawRecord 리스트

    Raises:
        DataLoadError: 네트워크 오류, 2xx가 아닌 응답, JSON 형식 오류
        FetchCancelled: 토큰이 취소된 경우

    Examples:
        >>> rows = fetch_sales_aggregates(limit=100)
        >>> rows[0].category
        'BEER'
    """
    token = cancel_token or CancellationToken()
    params = build_query_params(limit)

    # ========================================
    # 1단계: HTTP 요청
    # ========================================
    token.raise_if_cancelled()
    http = session if session is not None else requests
    logger.info(f"Fetching sales aggregates from {endpoint}")
    try:
        with measure_time_context("Socrata aggregate fetch"):
            response = http.get(endpoint, params=params, timeout=timeout)
    except requests.RequestException as exc:
        raise DataLoadError(f"Data fetch failed ({exc})") from exc

    token.raise_if_cancelled()

    # ========================================
    # 2단계: 응답 검증
    # ========================================
    if not response.ok:
        logger.error(f"Socrata responded with HTTP {response.status_code}")
        raise DataLoadError(
            f"Data fetch failed ({response.status_code})", status=response.status_code
        )

    try:
        payload: Any = response.json()
    except ValueError as exc:
        raise DataLoadError("Data fetch failed (invalid JSON)", status=response.status_code) from exc

    if not isinstance(payload, list):
        raise DataLoadError(
            "Data fetch failed (unexpected payload)", status=response.status_code
        )

    # ========================================
    # 3단계: 행 정규화
    # ========================================
    rows = normalize_rows(payload)
    logger.info(f"Fetched {len(rows)} aggregate rows")
    return rows
