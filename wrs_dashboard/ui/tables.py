"""월별 합계 테이블 렌더링 모듈."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from ..core.config import CONFIG
from ..domain.calendar import month_name
from ..domain.models import MonthlyBucket
from .kpi.formatters import format_number

TABLE_COLUMNS = ["Month", "Retail Sales", "Warehouse Sales", "Total"]


def monthly_table_frame(buckets: Sequence[MonthlyBucket]) -> pd.DataFrame:
    """버킷 목록을 표시용 DataFrame으로 변환합니다 (숫자는 포맷된 문자열)."""
    records = [
        {
            "Month": f"{month_name(b.month)} {b.year}",
            "Retail Sales": format_number(b.retail_sales),
            "Warehouse Sales": format_number(b.warehouse_sales),
            "Total": format_number(b.total_sales),
        }
        for b in buckets
    ]
    return pd.DataFrame(records, columns=TABLE_COLUMNS)


def render_monthly_table(buckets: Sequence[MonthlyBucket]) -> None:
    with st.expander("View monthly totals table (aggregated)", expanded=False):
        frame = monthly_table_frame(buckets)
        if frame.empty:
            st.caption("No monthly totals for the current selection.")
            return
        st.dataframe(
            frame,
            hide_index=True,
            use_container_width=True,
            height=min(CONFIG.ui.table_height, 38 + 35 * len(frame)),
        )
