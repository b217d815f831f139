"""
Warehouse & Retail Sales 월별 대시보드 메인 엔트리 포인트

Montgomery County(MD) 창고/소매 판매 데이터를 서버 측에서 (연, 월, 품목 유형)
단위로 집계해 한 번 조회하고, 품목 유형/지표 선택에 따라 월별 추이를 보여줍니다.

구성:
- 데이터 로딩: data_sources.session (세션당 1회 조회, 캐시)
- 파생 계산: pipeline (집계 → 지표 투영 → KPI, st.cache_data 캐시)
- 화면: ui (KPI 카드, SVG 라인 차트, 월별 테이블, 투표 패널)

실행:
    streamlit run dashboard_app.py
"""

from __future__ import annotations

import logging
from typing import List

import streamlit as st

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from wrs_dashboard.analytics import category_options
from wrs_dashboard.core.config import (
    ALL_CATEGORIES,
    CONFIG,
    DATA_SOURCE_URL,
    DATASET_LABEL,
    load_firebase_settings,
)
from wrs_dashboard.data_sources import SessionStateStore
from wrs_dashboard.data_sources.session import (
    STATUS_ERROR,
    STATUS_LOADING,
    ensure_rows,
    request_reload,
)
from wrs_dashboard.domain.models import METRIC_LABELS, METRICS
from wrs_dashboard.pipeline import build_dashboard_view, clear_view_cache
from wrs_dashboard.ui import (
    handle_domain_errors,
    inject_dashboard_styles,
    render_kpi_cards,
    render_month_line_chart,
    render_monthly_table,
    render_vote_panel,
)
from wrs_dashboard.ui.adapters import dataset_error_message
from wrs_dashboard.voting import build_remote_sink

_ALL_LABEL = "All item types"


def _render_header() -> None:
    st.title(CONFIG.ui.page_title)
    st.markdown(
        f'<span class="wrs-pill">Dataset: {DATASET_LABEL}</span> '
        '<span class="wrs-pill">View: Monthly totals</span>',
        unsafe_allow_html=True,
    )
    st.caption(
        "Graphs the full dataset on one screen. Segment by **ITEM TYPE** "
        "(WINE / LIQUOR / BEER / etc.) and pick a sales metric."
    )


def _render_controls(categories: List[str]) -> tuple[str, str]:
    """품목 유형/지표 선택 위젯. (category, metric) 반환."""
    col_category, col_metric = st.columns(2)

    options = [ALL_CATEGORIES, *categories]
    category = col_category.selectbox(
        "Item type",
        options,
        index=0,
        format_func=lambda value: _ALL_LABEL if value == ALL_CATEGORIES else value,
        key="wrs_category",
    )

    metric = col_metric.selectbox(
        "Metric",
        list(METRICS),
        index=list(METRICS).index(CONFIG.ui.default_metric),
        format_func=lambda value: METRIC_LABELS[value],
        key="wrs_metric",
    )
    return category, metric


def _render_statement() -> None:
    st.subheader("Statement of Intent")
    st.caption("The stance below is based on the monthly alcohol product volume shown above.")
    st.markdown(
        "The chart shows consistently high monthly movement of alcohol products across "
        "multiple years. High volume and steady demand means substance harm should be treated "
        "as a **public health priority**, not just a personal issue."
    )
    st.markdown(
        "**I support** funding prevention and treatment programs, strengthening responsible "
        "retail practices, and using data-driven policy to reduce addiction, injuries, and "
        "poisoning outcomes."
    )
    st.info("Vote below if you support this stance. Signing up counts as registering to vote.")


def _render_footer() -> None:
    st.divider()
    st.markdown(f"**Data source:** [{DATA_SOURCE_URL}]({DATA_SOURCE_URL})")
    st.caption(
        "The Socrata API returns a compact monthly aggregation instead of all ~300k raw rows."
    )


def main() -> None:
    st.set_page_config(page_title=CONFIG.ui.page_title, layout="wide")
    inject_dashboard_styles()
    _render_header()

    # ========================================
    # 1단계: 데이터 로딩 (세션당 1회)
    # ========================================
    state = ensure_rows()
    if state.status == STATUS_LOADING:
        st.info("Loading dataset…")
    elif state.status == STATUS_ERROR:
        st.error(dataset_error_message(state.error or "unknown error"))
        if st.button("Reload dataset"):
            request_reload()
            clear_view_cache()
            st.rerun()

    rows = state.rows

    # ========================================
    # 2단계: 선택 + 파생 계산
    # ========================================
    category, metric = _render_controls(category_options(rows))

    main_col, side_col = st.columns([2, 1], gap="large")

    with main_col:
        st.subheader("Monthly Trend Chart")
        with handle_domain_errors():
            view = build_dashboard_view(rows, category=category, metric=metric)
            render_kpi_cards(view.kpis)
            render_month_line_chart(view.points, color=CONFIG.chart.series_color)
            render_monthly_table(view.buckets)

    # ========================================
    # 3단계: 입장문 + 투표 패널
    # ========================================
    with side_col:
        _render_statement()
        # 패널 내부에서 st.rerun()을 호출하므로 handle_domain_errors로 감싸지 않음
        render_vote_panel(
            store=SessionStateStore(),
            sink=build_remote_sink(load_firebase_settings()),
            category=category,
            metric=metric,
        )

    _render_footer()


if __name__ == "__main__":
    main()
