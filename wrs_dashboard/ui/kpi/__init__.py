"""KPI 카드와 숫자 포맷터."""

from .cards import build_kpi_cards, build_metric_card, render_kpi_cards
from .formatters import escape, format_compact, format_number

__all__ = [
    "build_kpi_cards",
    "build_metric_card",
    "render_kpi_cards",
    "escape",
    "format_compact",
    "format_number",
]
