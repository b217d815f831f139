"""Analytics helpers: 월별 집계, 지표 투영, KPI 요약."""

from .kpi import range_label, summarize
from .monthly import aggregate_monthly, bucket_key, category_options
from .projection import metric_value, project_metric

__all__ = [
    "aggregate_monthly",
    "bucket_key",
    "category_options",
    "metric_value",
    "project_metric",
    "range_label",
    "summarize",
]
