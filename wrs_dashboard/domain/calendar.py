"""월 이름/라벨 헬퍼."""

from __future__ import annotations

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    """1–12를 영문 월 이름으로 변환합니다. 범위 밖이면 "Month {n}"."""
    if isinstance(month, int) and 1 <= month <= 12:
        return MONTH_NAMES[month - 1]
    return f"Month {month}"


def month_short(month: int) -> str:
    """월 이름 앞 3글자 ("Jan"). 범위 밖 값은 "Mon"이 됩니다."""
    return month_name(month)[:3]


def year_suffix(year: int) -> str:
    """연도의 마지막 두 자리 ("2024" → "24")."""
    return str(year)[-2:]
