"""
UI 컴포넌트 테스트

Streamlit 함수들을 Mock으로 대체하여 카드/테이블/예외 어댑터/투표 메시지를 검증합니다.
"""
from __future__ import annotations

from unittest.mock import patch

import pytest

from wrs_dashboard.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DataLoadError,
    FetchCancelled,
    VoteWriteError,
)
from wrs_dashboard.domain.models import KPISummary, MonthlyBucket, VoteRecord
from wrs_dashboard.ui.adapters import dataset_error_message, handle_domain_errors
from wrs_dashboard.ui.kpi.cards import build_kpi_cards, render_kpi_cards
from wrs_dashboard.ui.tables import TABLE_COLUMNS, monthly_table_frame
from wrs_dashboard.ui.vote_panel import format_vote_time, vote_message


def test_kpi_cards_labels_and_values():
    summary = KPISummary(sum=1234567.5, average=175.0, latest=0.0, range_label="Jan 2023 → Dec 2024")
    cards = build_kpi_cards(summary)

    assert len(cards) == 3
    assert "Total (Jan 2023 → Dec 2024)" in cards[0]
    assert "1,234,567.5" in cards[0]
    assert "Monthly average" in cards[1]
    assert ">175<" in cards[1]
    assert "Latest month" in cards[2]
    assert ">0<" in cards[2]


def test_render_kpi_cards_writes_single_grid():
    summary = KPISummary(sum=0.0, average=0.0, latest=0.0, range_label="—")

    with patch("wrs_dashboard.ui.kpi.cards.st") as mock_st, patch(
        "wrs_dashboard.ui.kpi.styles.st"
    ) as mock_styles_st:
        render_kpi_cards(summary)

    mock_st.markdown.assert_called_once()
    html, = mock_st.markdown.call_args[0]
    assert html.startswith('<div class="kpi-row"')
    assert mock_st.markdown.call_args[1]["unsafe_allow_html"] is True
    mock_styles_st.markdown.assert_called_once()


def test_monthly_table_frame():
    buckets = [MonthlyBucket("2023-01", 2023, 1, 1000.0, 55.5)]
    frame = monthly_table_frame(buckets)

    assert list(frame.columns) == TABLE_COLUMNS
    assert frame.iloc[0].tolist() == ["January 2023", "1,000", "55.5", "1,055.5"]


def test_monthly_table_frame_empty():
    frame = monthly_table_frame([])
    assert frame.empty
    assert list(frame.columns) == TABLE_COLUMNS


def test_dataset_error_message():
    assert dataset_error_message("Data fetch failed (503)") == (
        "Couldn’t load the dataset. (Data fetch failed (503))"
    )


@pytest.mark.parametrize(
    "error, channel",
    [
        (DataLoadError("Data fetch failed (500)", status=500), "error"),
        (AuthenticationError("EMAIL_EXISTS"), "error"),
        (VoteWriteError("PERMISSION_DENIED"), "warning"),
        (ConfigurationError("not configured"), "info"),
    ],
)
def test_handle_domain_errors_routes_to_banner(error, channel):
    with patch("wrs_dashboard.ui.adapters.st") as mock_st:
        with handle_domain_errors():
            raise error

    getattr(mock_st, channel).assert_called_once()


def test_handle_domain_errors_ignores_cancellation():
    with patch("wrs_dashboard.ui.adapters.st") as mock_st:
        with handle_domain_errors():
            raise FetchCancelled("stale")

    mock_st.error.assert_not_called()
    mock_st.warning.assert_not_called()


def test_handle_domain_errors_reports_unexpected_exception():
    with patch("wrs_dashboard.ui.adapters.st") as mock_st:
        with handle_domain_errors():
            raise RuntimeError("boom")

    mock_st.error.assert_called_once()
    mock_st.exception.assert_called_once()


def test_vote_messages():
    support = VoteRecord(stance="support", at="not-a-timestamp", category="ALL", metric="total")
    against = VoteRecord(stance="against", at="not-a-timestamp", category="ALL", metric="total")

    assert vote_message(support).startswith("**Thank you for your support.**")
    assert vote_message(against).startswith("**Thanks for participating.**")
    assert vote_message(support).endswith("recorded on not-a-timestamp.")


def test_format_vote_time_is_local_time():
    text = format_vote_time("2024-05-01T12:00:00+00:00")
    assert len(text) == len("2024-05-01 12:00:00")
    assert text[4] == "-" and text[13] == ":"
