"""
숫자 포맷팅 테스트
"""
from __future__ import annotations

import math

import pytest

from wrs_dashboard.ui.kpi.formatters import escape, format_compact, format_number, value_font_size


@pytest.mark.parametrize(
    "value, expected",
    [
        (1500, "1.5K"),
        (2_500_000, "2.5M"),
        (5, "5.00"),
        (500, "500"),
        (10, "10"),
        (999_999, "1000.0K"),
        (-1500, "-1.5K"),
        (0, "0.00"),
    ],
)
def test_format_compact(value, expected):
    assert format_compact(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (175, "175"),
        (1234.5, "1,234.5"),
        (1234567.891, "1,234,567.89"),
        (100, "100"),
        (0, "0"),
        (0.004, "0"),
        (-2500.25, "-2,500.25"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value", [None, math.nan, math.inf, "abc"])
def test_format_number_invalid_values(value):
    assert format_number(value) == "-"


def test_escape_html():
    assert escape('<b>"WINE" & BEER</b>') == "&lt;b&gt;&quot;WINE&quot; &amp; BEER&lt;/b&gt;"
    assert escape(None) == ""


def test_value_font_size_shrinks_long_values():
    assert value_font_size("1,234") == "1.6em"
    assert value_font_size("1,234,567.89") == "1.35em"
    assert value_font_size("123,456,789,012.5") == "1.0em"
