"""
세션 상태 관리

Streamlit 세션 상태에 조회 결과와 상태(idle/loading/success/error)를 보관합니다.
세션당 한 번만 조회하며, 실패해도 자동 재시도하지 않습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import streamlit as st

from ..core.config import CONFIG
from ..domain.exceptions import DataLoadError, FetchCancelled
from ..domain.models import RawRecord
from .socrata import CancellationToken, fetch_sales_aggregates

logger = logging.getLogger(__name__)

STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

_STATE_KEY = "wrs_load_state"
_TOKEN_KEY = "_wrs_fetch_token"
_RELOAD_KEY = "_wrs_trigger_reload"


@dataclass
class LoadState:
    status: str = STATUS_IDLE
    rows: List[RawRecord] = field(default_factory=list)
    error: Optional[str] = None


@st.cache_data(ttl=CONFIG.fetch.cache_ttl_seconds, show_spinner=False)
def load_sales_aggregates(_cancel_token: Optional[CancellationToken] = None) -> List[RawRecord]:
    """캐시된 Socrata 조회. 예외는 캐시되지 않습니다."""
    return fetch_sales_aggregates(cancel_token=_cancel_token)


def request_reload() -> None:
    """다음 실행에서 캐시를 비우고 다시 조회하도록 표시합니다."""
    st.session_state[_RELOAD_KEY] = True


def ensure_rows() -> LoadState:
    """
    조회 결과를 세션 상태에서 꺼내거나, 처음이면 조회합니다.

    1. 세션에 결과가 있으면(성공/실패 모두) 그대로 반환
    2. 새로고침이 요청되었으면 캐시를 비우고 다시 조회
    3. 이전 조회 토큰은 취소하여 늦게 도착한 결과가 상태를 덮어쓰지 않게 함

    Returns:
        LoadState. status가 "error"이면 error에 메시지가 담깁니다.

    Session State Keys:
        - wrs_load_state: LoadState 인스턴스
        - _wrs_fetch_token: 진행 중인 조회의 CancellationToken
    """
    state: Optional[LoadState] = st.session_state.get(_STATE_KEY)
    reload_requested = bool(st.session_state.pop(_RELOAD_KEY, False))

    if state is not None and not reload_requested:
        return state

    if reload_requested:
        logger.info("Reload requested, clearing cached aggregates")
        load_sales_aggregates.clear()

    previous: Optional[CancellationToken] = st.session_state.get(_TOKEN_KEY)
    if previous is not None:
        previous.cancel()
    token = CancellationToken()
    st.session_state[_TOKEN_KEY] = token

    try:
        with st.spinner("Loading dataset…"):
            rows = load_sales_aggregates(_cancel_token=token)
        token.raise_if_cancelled()
    except FetchCancelled:
        logger.info("Fetch cancelled, discarding result")
        return LoadState(status=STATUS_LOADING)
    except DataLoadError as exc:
        logger.error(f"Dataset load failed: {exc}")
        state = LoadState(status=STATUS_ERROR, error=str(exc))
    else:
        state = LoadState(status=STATUS_SUCCESS, rows=rows)

    st.session_state[_STATE_KEY] = state
    return state
