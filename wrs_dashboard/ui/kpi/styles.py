"""KPI 카드/배지 스타일 모듈."""

from __future__ import annotations

import streamlit as st


def inject_dashboard_styles() -> None:
    """Inject shared CSS for KPI cards and pills (re-inject on each run)."""

    st.markdown(
        """
        <style>
        .kpi-row {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(var(--min-card-width, 200px), 1fr));
            gap: 0.75rem;
            margin: 0.5rem 0 0.75rem 0;
        }

        .kpi-card {
            border: 1px solid rgba(49, 51, 63, 0.2);
            border-radius: 0.75rem;
            padding: 0.85rem 1rem;
            background-color: rgba(255, 255, 255, 0.8);
            box-shadow: 0 8px 16px rgba(49, 51, 63, 0.08);
            display: flex;
            flex-direction: column;
            gap: 0.3rem;
        }

        .kpi-label {
            font-size: 0.85rem;
            color: rgba(49, 51, 63, 0.75);
        }

        .kpi-value {
            font-weight: 700;
            line-height: 1.2;
        }

        .kpi-note {
            font-size: 0.75rem;
            color: rgba(49, 51, 63, 0.55);
        }

        .wrs-pill {
            display: inline-block;
            padding: 0.15rem 0.65rem;
            margin: 0 0.35rem 0.35rem 0;
            border-radius: 999px;
            font-size: 0.8rem;
            background-color: rgba(124, 92, 255, 0.12);
            border: 1px solid rgba(124, 92, 255, 0.35);
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
