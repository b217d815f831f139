"""KPI/차트 숫자 포맷팅 유틸리티 모듈."""

from __future__ import annotations

import html
import math


def escape(value: object) -> str:
    """HTML/SVG 텍스트와 속성에 넣을 값을 이스케이프합니다."""
    return html.escape(str(value if value is not None else ""), quote=True)


def format_number(value: float | int | None) -> str:
    """
    천 단위 구분 기호와 최대 소수 둘째 자리로 포맷팅합니다.

    Examples:
        >>> format_number(1234.5)
        '1,234.5'
        >>> format_number(175)
        '175'
    """
    if value is None:
        return "-"
    try:
        number = float(value)
    except (TypeError, ValueError):
        return "-"
    if not math.isfinite(number):
        return "-"
    text = f"{number:,.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_compact(value: float) -> str:
    """
    축 눈금/툴팁용 축약 표기.

    - 절댓값 1,000,000 이상: "2.5M" (소수 첫째 자리)
    - 1,000 이상: "1.5K"
    - 10 이상: 정수 ("500")
    - 그 외: 소수 둘째 자리 ("5.00")
    """
    n = float(value)
    magnitude = abs(n)
    if magnitude >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if magnitude >= 1_000:
        return f"{n / 1_000:.1f}K"
    if magnitude >= 10:
        return f"{n:.0f}"
    return f"{n:.2f}"


def value_font_size(value: str, *, base_size: float = 1.6, min_size: float = 1.0) -> str:
    """긴 숫자는 작은 폰트로 표시하여 카드 안에 맞춥니다 (em 단위)."""
    length = len(str(value))
    if length <= 9:
        return f"{base_size}em"
    if length <= 13:
        return f"{max(min_size, base_size - 0.25)}em"
    return f"{min_size}em"
