"""KPI 카드 렌더링 모듈.

합계/월평균/최근월 3개 카드를 CSS Grid로 렌더링합니다.
"""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from ...domain.models import KPISummary
from .formatters import escape, format_number, value_font_size
from .styles import inject_dashboard_styles


def build_metric_card(label: str, value: str, note: str = "") -> str:
    value_text = "-" if value is None else str(value)
    font_size = value_font_size(value_text)
    note_html = f'<div class="kpi-note">{escape(note)}</div>' if note else ""
    return (
        '<div class="kpi-card">'
        f'<div class="kpi-label">{escape(label)}</div>'
        f'<div class="kpi-value" style="font-size:{font_size}; white-space:nowrap;">{escape(value_text)}</div>'
        f"{note_html}"
        "</div>"
    )


def build_grid(items: Sequence[str], *, min_width: int = 200) -> str:
    if not items:
        return ""
    return (
        f'<div class="kpi-row" style="--min-card-width: {int(min_width)}px;">'
        + "".join(items)
        + "</div>"
    )


def build_kpi_cards(summary: KPISummary) -> list[str]:
    """KPISummary를 카드 HTML 목록으로 변환합니다."""
    return [
        build_metric_card(
            f"Total ({summary.range_label})",
            format_number(summary.sum),
            "Sum of selected metric",
        ),
        build_metric_card("Monthly average", format_number(summary.average), "Average per month"),
        build_metric_card("Latest month", format_number(summary.latest), "Most recent datapoint"),
    ]


def render_kpi_cards(summary: KPISummary) -> None:
    inject_dashboard_styles()
    st.markdown(build_grid(build_kpi_cards(summary)), unsafe_allow_html=True)
