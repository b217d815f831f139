"""차트 렌더링 모듈.

MonthLineChart(기하 계산 + SVG 생성)와 Streamlit 출력 함수를 제공합니다.
"""

from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st

from ...domain.models import ChartPoint
from .month_line import EMPTY_MESSAGE, HitRegion, MonthLineChart


def render_month_line_chart(
    points: Sequence[ChartPoint],
    *,
    color: Optional[str] = None,
    height: Optional[int] = None,
) -> MonthLineChart:
    """월별 차트를 현재 Streamlit 컨테이너에 출력하고 차트 객체를 반환합니다."""
    chart = MonthLineChart(points, color=color, height=height)
    st.markdown(chart.to_html(), unsafe_allow_html=True)
    return chart


__all__ = [
    "EMPTY_MESSAGE",
    "HitRegion",
    "MonthLineChart",
    "render_month_line_chart",
]
