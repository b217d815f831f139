"""Configuration and constants for the Warehouse & Retail Sales dashboard.

데이터셋 엔드포인트, 사용자별 상태 키, 차트 레이아웃 등 전역 설정을 제공합니다.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# ============================================================
# 데이터셋 설정
# ============================================================

# Socrata 리소스 엔드포인트 (월/연/품목 유형별 판매 집계)
SOCRATA_ENDPOINT = "https://data.montgomerycountymd.gov/resource/v76h-r7br.json"

# 데이터 출처 (data.gov 카탈로그)
DATA_SOURCE_URL = "https://catalog.data.gov/dataset/warehouse-and-retail-sales"

# 투표 컨텍스트와 화면에 표시할 데이터셋 이름
DATASET_LABEL = "Warehouse and Retail Sales (Montgomery County, MD)"

# 카테고리 필터 "전체" 센티널
ALL_CATEGORIES = "ALL"

# 카테고리가 비어있는 행에 부여하는 값
UNKNOWN_CATEGORY = "UNKNOWN"


# ============================================================
# 사용자별 상태 저장 키 (st.session_state)
# ============================================================

AUTH_STORAGE_KEY = "wrs_dashboard.auth"
VOTE_STORAGE_KEY = "wrs_dashboard.vote"

# 로컬 데모 모드에서 사용하는 토큰/ID
LOCAL_DEMO_TOKEN = "local-demo"


# ============================================================
# 세부 설정
# ============================================================

@dataclass(frozen=True)
class FetchConfig:
    """Socrata 조회 관련 설정"""

    endpoint: str = SOCRATA_ENDPOINT

    # 서버 집계 결과 최대 행 수
    row_limit: int = 50000

    # HTTP 타임아웃 (초)
    timeout_seconds: float = 30.0

    # st.cache_data 보관 시간 (초)
    cache_ttl_seconds: int = 3600


@dataclass(frozen=True)
class ChartConfig:
    """월별 라인 차트 레이아웃 설정 (논리 좌표 단위)"""

    width: int = 1000
    height: int = 320

    pad_left: int = 70
    pad_right: int = 18
    pad_top: int = 22
    pad_bottom: int = 52

    # y축 도메인 여유 비율
    domain_pad_ratio: float = 0.12

    # y축 눈금 구간 수 (눈금 5개)
    y_tick_steps: int = 4

    # x축 라벨 전체 표시 임계값 / 희소 표시 시 목표 라벨 수
    dense_label_limit: int = 12
    sparse_label_target: int = 8

    # 툴팁 박스 크기
    tooltip_width: int = 180
    tooltip_height: int = 56

    # 컨테이너 표시 높이 (픽셀)
    display_height: int = 280

    series_color: str = "#7c5cff"


@dataclass(frozen=True)
class UIConfig:
    """UI 표시 관련 설정"""

    page_title: str = "Warehouse & Retail Sales by Month"

    # 기본 지표
    default_metric: str = "total"

    # 월별 합계 테이블 높이 (픽셀)
    table_height: int = 360


@dataclass(frozen=True)
class DashboardConfig:
    """대시보드 전역 설정"""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
    ui: UIConfig = field(default_factory=UIConfig)


# ============================================================
# Firebase (인증/투표 저장) 설정
# ============================================================

@dataclass(frozen=True)
class FirebaseSettings:
    """Firebase REST 연동 설정. 값이 없으면 해당 기능은 로컬 전용으로 동작합니다."""

    api_key: str = ""
    project_id: str = ""

    @property
    def auth_enabled(self) -> bool:
        return bool(self.api_key)

    @property
    def persistence_enabled(self) -> bool:
        return bool(self.project_id)


def _read_streamlit_secrets() -> Mapping[str, Any]:
    try:
        import streamlit as st

        section = st.secrets.get("firebase", {})
        return dict(section) if section else {}
    except Exception:
        # secrets.toml이 없으면 Streamlit이 예외를 던짐
        return {}


def load_firebase_settings(
    secrets: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FirebaseSettings:
    """
    Streamlit secrets의 [firebase] 섹션과 환경변수에서 Firebase 설정을 읽습니다.

    우선순위:
    1. secrets: web_api_key → api_key, project_id
    2. 환경변수: FIREBASE_WEB_API_KEY → FIREBASE_API_KEY, FIREBASE_PROJECT_ID

    Args:
        secrets: [firebase] 섹션 매핑 (None이면 st.secrets에서 읽음)
        environ: 환경변수 매핑 (None이면 os.environ)

    Returns:
        FirebaseSettings 인스턴스. 값이 없으면 빈 문자열.
    """
    section = _read_streamlit_secrets() if secrets is None else secrets
    env = os.environ if environ is None else environ

    api_key = (
        section.get("web_api_key")
        or section.get("api_key")
        or env.get("FIREBASE_WEB_API_KEY")
        or env.get("FIREBASE_API_KEY")
        or ""
    )
    project_id = section.get("project_id") or env.get("FIREBASE_PROJECT_ID") or ""

    settings = FirebaseSettings(api_key=str(api_key).strip(), project_id=str(project_id).strip())
    logger.debug(
        f"Firebase settings: auth_enabled={settings.auth_enabled}, "
        f"persistence_enabled={settings.persistence_enabled}"
    )
    return settings


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = DashboardConfig()
