"""
UI 계층 퍼블릭 API

Streamlit 의존성은 이 계층에만 존재합니다.
"""

from .adapters import handle_domain_errors
from .charts import MonthLineChart, render_month_line_chart
from .kpi import render_kpi_cards
from .kpi.styles import inject_dashboard_styles
from .tables import monthly_table_frame, render_monthly_table
from .vote_panel import render_vote_panel

__all__ = [
    "handle_domain_errors",
    "MonthLineChart",
    "render_month_line_chart",
    "render_kpi_cards",
    "inject_dashboard_styles",
    "monthly_table_frame",
    "render_monthly_table",
    "render_vote_panel",
]
