"""
도메인 모델: 대시보드의 핵심 데이터 구조

모든 모델은 불변(frozen) 데이터클래스입니다. 집계 결과는 원본 행 리스트와
현재 선택 상태(카테고리, 지표)로부터 매번 새로 계산되며, 원본 행을 참조하지 않습니다.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from ..core.config import LOCAL_DEMO_TOKEN

# ============================================================
# 지표 식별자
# ============================================================

METRIC_TOTAL = "total"
METRIC_RETAIL = "retail"
METRIC_WAREHOUSE = "warehouse"

METRICS = (METRIC_TOTAL, METRIC_RETAIL, METRIC_WAREHOUSE)

# 선택 위젯에 표시할 지표 이름
METRIC_LABELS = {
    METRIC_TOTAL: "Total Sales (Retail + Warehouse)",
    METRIC_RETAIL: "Retail Sales",
    METRIC_WAREHOUSE: "Warehouse Sales",
}

STANCE_SUPPORT = "support"
STANCE_AGAINST = "against"


@dataclass(frozen=True)
class RawRecord:
    """
    서버 집계 결과 1행 (연/월/카테고리 단위).

    Attributes:
        year: 연도. 파싱 실패 시 NaN이 들어올 수 있으며 집계 단계에서 제외됩니다.
        month: 월 (1–12). 파싱 실패 시 NaN.
        category: 품목 유형 (WINE, BEER, LIQUOR 등)
        retail_sales: 소매 판매량 합계 (파싱 실패 시 0)
        warehouse_sales: 창고 판매량 합계 (파싱 실패 시 0)
    """

    year: int
    month: int
    category: str
    retail_sales: float = 0.0
    warehouse_sales: float = 0.0


@dataclass(frozen=True)
class MonthlyBucket:
    """
    카테고리 필터 적용 후 (연, 월) 단위로 합산된 레코드.

    key는 "YYYY-MM" 형식이며 (연, 월) 조합마다 유일합니다.
    """

    key: str
    year: int
    month: int
    retail_sales: float
    warehouse_sales: float

    @property
    def total_sales(self) -> float:
        return self.retail_sales + self.warehouse_sales


@dataclass(frozen=True)
class ChartPoint:
    """차트 1개 지점. label은 "Jan '24", full_label은 "January 2024" 형식."""

    key: str
    label: str
    full_label: str
    value: float


@dataclass(frozen=True)
class KPISummary:
    sum: float
    average: float
    latest: float
    range_label: str


@dataclass(frozen=True)
class AuthIdentity:
    """
    로그인된 사용자 정보.

    인증 서비스가 설정되지 않은 로컬 데모 모드에서는 id_token이 "local-demo"입니다.
    """

    email: str
    id_token: str
    local_id: str

    @property
    def is_local(self) -> bool:
        return self.id_token == LOCAL_DEMO_TOKEN

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AuthIdentity":
        """저장된 dict로부터 복원합니다. 필수 값이 없으면 ValueError."""
        email = data.get("email")
        id_token = data.get("id_token")
        if not isinstance(email, str) or not email:
            raise ValueError("identity without email")
        if not isinstance(id_token, str) or not id_token:
            raise ValueError("identity without id_token")
        return cls(email=email, id_token=id_token, local_id=str(data.get("local_id") or ""))


@dataclass(frozen=True)
class VoteRecord:
    """
    로컬에 기록된 투표.

    Attributes:
        stance: "support" 또는 "against"
        at: 기록 시각 (ISO-8601, UTC)
        category: 투표 시점의 카테고리 필터
        metric: 투표 시점의 지표
    """

    stance: str
    at: str
    category: str
    metric: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VoteRecord":
        stance = data.get("stance")
        at = data.get("at")
        if stance not in (STANCE_SUPPORT, STANCE_AGAINST):
            raise ValueError(f"unknown stance: {stance!r}")
        if not isinstance(at, str) or not at:
            raise ValueError("vote without timestamp")
        return cls(
            stance=stance,
            at=at,
            category=str(data.get("category") or ""),
            metric=str(data.get("metric") or ""),
        )


@dataclass(frozen=True)
class VoteContext:
    """원격 투표 문서에 함께 저장되는 화면 상태."""

    dataset: str
    category: str
    metric: str
