"""
월별 집계 테스트

카테고리 필터, (연, 월) 합산, 정렬, 유효하지 않은 연/월 처리를 검증합니다.
"""
from __future__ import annotations

import math

import pytest

from wrs_dashboard.analytics import aggregate_monthly, bucket_key, category_options
from wrs_dashboard.domain.models import RawRecord


@pytest.fixture
def sample_rows():
    return [
        RawRecord(2023, 1, "WINE", 100, 50),
        RawRecord(2023, 1, "BEER", 20, 5),
    ]


@pytest.fixture
def multi_month_rows():
    # 입력 순서를 일부러 섞어 둠
    return [
        RawRecord(2024, 2, "WINE", 10, 1),
        RawRecord(2023, 12, "BEER", 7, 3),
        RawRecord(2024, 1, "LIQUOR", 4, 4),
        RawRecord(2023, 12, "WINE", 3, 2),
        RawRecord(2024, 2, "BEER", 5, 0),
        RawRecord(2024, 1, "WINE", 1.5, 2.25),
    ]


def test_all_categories_sum_into_one_bucket(sample_rows):
    buckets = aggregate_monthly(sample_rows, "ALL")

    assert len(buckets) == 1
    bucket = buckets[0]
    assert bucket.key == "2023-01"
    assert bucket.year == 2023
    assert bucket.month == 1
    assert bucket.retail_sales == 120
    assert bucket.warehouse_sales == 55
    assert bucket.total_sales == 175


def test_category_filter_keeps_only_matching_rows(sample_rows):
    buckets = aggregate_monthly(sample_rows, "WINE")

    assert len(buckets) == 1
    assert buckets[0].retail_sales == 100
    assert buckets[0].warehouse_sales == 50


def test_unknown_category_yields_empty_series(sample_rows):
    assert aggregate_monthly(sample_rows, "CIDER") == []


def test_keys_are_unique_and_ascending(multi_month_rows):
    buckets = aggregate_monthly(multi_month_rows)
    keys = [b.key for b in buckets]

    assert keys == ["2023-12", "2024-01", "2024-02"]
    assert len(set(keys)) == len(keys)
    assert keys == sorted(keys)


def test_sales_are_conserved_under_filter(multi_month_rows):
    for category in ["ALL", "WINE", "BEER", "LIQUOR"]:
        kept = [r for r in multi_month_rows if category == "ALL" or r.category == category]
        buckets = aggregate_monthly(multi_month_rows, category)

        assert sum(b.retail_sales for b in buckets) == pytest.approx(
            sum(r.retail_sales for r in kept)
        )
        assert sum(b.warehouse_sales for b in buckets) == pytest.approx(
            sum(r.warehouse_sales for r in kept)
        )


def test_rows_with_nan_month_are_dropped():
    rows = [
        RawRecord(2023, math.nan, "WINE", 999, 999),
        RawRecord(2023, 3, "WINE", 1, 2),
    ]

    buckets = aggregate_monthly(rows)

    assert [b.key for b in buckets] == ["2023-03"]
    assert buckets[0].retail_sales == 1
    assert buckets[0].warehouse_sales == 2


def test_rows_with_nan_year_are_dropped():
    rows = [RawRecord(math.nan, 5, "BEER", 10, 10)]
    assert aggregate_monthly(rows) == []


def test_empty_input_returns_empty_list():
    assert aggregate_monthly([]) == []


def test_bucket_key_is_zero_padded():
    assert bucket_key(2024, 3) == "2024-03"
    assert bucket_key(2024, 11) == "2024-11"


def test_category_options_sorted_unique(multi_month_rows):
    assert category_options(multi_month_rows) == ["BEER", "LIQUOR", "WINE"]
    assert category_options([]) == []
