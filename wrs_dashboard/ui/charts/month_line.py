"""월별 라인/영역 SVG 차트 모듈.

외부 차트 라이브러리 없이 값 → 좌표 변환을 직접 계산하여 SVG를 만듭니다.
호버는 SVG 내부 CSS(:hover)로 처리되므로 서버 재실행 없이 동작합니다.
툴팁이 다른 마커에 가려지지 않도록 호버 그룹은 모든 마커 다음에 그립니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ...core.config import CONFIG, ChartConfig
from ...domain.models import ChartPoint
from ..kpi.formatters import escape, format_compact

EMPTY_MESSAGE = "No chart data to display."

_GRID_STROKE = "rgba(255,255,255,0.08)"
_AXIS_STROKE = "rgba(255,255,255,0.12)"
_TICK_FILL = "rgba(255,255,255,0.65)"
_LABEL_FILL = "rgba(255,255,255,0.62)"
_HOVER_FILL = "#ffffff"
_PANEL_BACKGROUND = "#15131f"


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class HitRegion:
    """호버 판정 영역 (지점 하나당 하나, 플롯 높이 전체)."""

    index: int
    x: float
    y: float
    width: float
    height: float


class MonthLineChart:
    """
    ChartPoint 시계열을 1000×320 논리 좌표의 라인/영역 차트로 변환합니다.

    Attributes:
        points: 시간순 차트 지점
        color: 시리즈 색상
        height: 컨테이너 표시 높이 (픽셀)
        config: 레이아웃 설정

    Examples:
        >>> chart = MonthLineChart(points)
        >>> chart.x_label_indices()[-1] == len(points) - 1
        True
        >>> svg = chart.render_svg()
    """

    def __init__(
        self,
        points: Sequence[ChartPoint],
        *,
        color: Optional[str] = None,
        height: Optional[int] = None,
        config: ChartConfig = CONFIG.chart,
        chart_id: str = "mlc",
    ) -> None:
        self.points = list(points)
        self.config = config
        self.color = color or config.series_color
        self.height = height or config.display_height
        self.chart_id = chart_id
        self._domain = self._compute_domain()

    # ========================================
    # 기하 계산
    # ========================================

    @property
    def inner_width(self) -> float:
        cfg = self.config
        return cfg.width - cfg.pad_left - cfg.pad_right

    @property
    def inner_height(self) -> float:
        cfg = self.config
        return cfg.height - cfg.pad_top - cfg.pad_bottom

    @property
    def plot_bottom(self) -> float:
        return self.config.pad_top + self.inner_height

    def _compute_domain(self) -> Tuple[float, float]:
        values = [p.value for p in self.points]
        raw_min = min(values) if values else 0.0
        raw_max = max(values) if values else 1.0
        # 모든 값이 같으면 높이 0 도메인을 피하기 위해 1로 고정
        pad = (raw_max - raw_min) * self.config.domain_pad_ratio or 1.0
        return raw_min - pad, raw_max + pad

    @property
    def y_domain(self) -> Tuple[float, float]:
        return self._domain

    def y_ticks(self) -> List[float]:
        """도메인을 y_tick_steps 구간으로 나눈 눈금 값 (기본 5개)."""
        low, high = self._domain
        steps = self.config.y_tick_steps
        return [low + (high - low) * i / steps for i in range(steps + 1)]

    def x_at(self, index: int) -> float:
        """지점 인덱스의 x 좌표. 지점이 하나면 가운데."""
        count = len(self.points)
        if count <= 1:
            return self.config.pad_left + self.inner_width / 2
        return self.config.pad_left + self.inner_width * index / (count - 1)

    def y_at(self, value: float) -> float:
        """값의 y 좌표. 도메인 밖 값은 플롯 경계로 잘립니다."""
        low, high = self._domain
        t = (value - low) / ((high - low) or 1.0)
        return self.config.pad_top + self.inner_height * (1 - clamp(t, 0.0, 1.0))

    def line_path(self) -> str:
        segments = []
        for i, point in enumerate(self.points):
            cmd = "M" if i == 0 else "L"
            segments.append(f"{cmd} {self.x_at(i):.2f} {self.y_at(point.value):.2f}")
        return " ".join(segments)

    def area_path(self) -> str:
        """라인을 플롯 바닥까지 닫은 영역 경로."""
        if not self.points:
            return ""
        last = len(self.points) - 1
        bottom = f"{self.plot_bottom:.2f}"
        return (
            f"{self.line_path()} L {self.x_at(last):.2f} {bottom} "
            f"L {self.x_at(0):.2f} {bottom} Z"
        )

    def x_label_indices(self) -> List[int]:
        """
        x축 라벨을 표시할 인덱스.

        12개 이하이면 전부, 그보다 많으면 ceil(n/8) 간격과 마지막 지점.
        """
        count = len(self.points)
        if count <= self.config.dense_label_limit:
            return list(range(count))
        step = math.ceil(count / self.config.sparse_label_target)
        return [i for i in range(count) if i % step == 0 or i == count - 1]

    def hit_regions(self) -> List[HitRegion]:
        """지점마다 좌우로 지점 간격의 절반씩 걸친 호버 영역."""
        count = len(self.points)
        width = self.inner_width / max(count, 1)
        return [
            HitRegion(
                index=i,
                x=self.x_at(i) - width / 2,
                y=float(self.config.pad_top),
                width=width,
                height=self.inner_height,
            )
            for i in range(count)
        ]

    def tooltip_origin(self, index: int) -> Tuple[float, float]:
        """툴팁 박스 좌상단 좌표. 플롯 좌우 경계를 넘지 않도록 잘립니다."""
        cfg = self.config
        half = cfg.tooltip_width / 2
        x = clamp(
            self.x_at(index) - half,
            cfg.pad_left,
            cfg.width - cfg.pad_right - cfg.tooltip_width,
        )
        return x, float(cfg.pad_top + 8)

    # ========================================
    # SVG 렌더링
    # ========================================

    def _style_block(self) -> str:
        """호버 그룹은 기본 숨김, 해당 지점의 히트 영역 위에서만 표시."""
        cid = self.chart_id
        return (
            "<style>"
            f"#{cid} .mlc-hover{{visibility:hidden;pointer-events:none;}}"
            f"#{cid} .mlc-marker{{pointer-events:none;}}"
            f"#{cid} .mlc-point:hover .mlc-hover{{visibility:visible;}}"
            "</style>"
        )

    def _grid(self) -> str:
        cfg = self.config
        parts = []
        for tick in self.y_ticks():
            y = self.y_at(tick)
            parts.append(
                f'<g><line x1="{cfg.pad_left}" x2="{cfg.width - cfg.pad_right}" '
                f'y1="{y:.2f}" y2="{y:.2f}" stroke="{_GRID_STROKE}"/>'
                f'<text x="{cfg.pad_left - 10}" y="{y + 4:.2f}" text-anchor="end" '
                f'font-size="12" fill="{_TICK_FILL}">{escape(format_compact(tick))}</text></g>'
            )
        bottom = f"{self.plot_bottom:.2f}"
        parts.append(
            f'<line x1="{cfg.pad_left}" x2="{cfg.width - cfg.pad_right}" '
            f'y1="{bottom}" y2="{bottom}" stroke="{_AXIS_STROKE}"/>'
        )
        parts.append(
            f'<line x1="{cfg.pad_left}" x2="{cfg.pad_left}" '
            f'y1="{cfg.pad_top}" y2="{bottom}" stroke="{_AXIS_STROKE}"/>'
        )
        return "".join(parts)

    def _x_labels(self) -> str:
        y = self.config.height - 18
        return "".join(
            f'<text x="{self.x_at(i):.2f}" y="{y}" text-anchor="middle" '
            f'font-size="12" fill="{_LABEL_FILL}">{escape(self.points[i].label)}</text>'
            for i in self.x_label_indices()
        )

    def _markers(self) -> str:
        return "".join(
            f'<circle class="mlc-marker" data-index="{i}" cx="{self.x_at(i):.2f}" '
            f'cy="{self.y_at(point.value):.2f}" r="4" fill="{self.color}" opacity="0.85"/>'
            for i, point in enumerate(self.points)
        )

    def _point_group(self, region: HitRegion) -> str:
        cfg = self.config
        point = self.points[region.index]
        x = self.x_at(region.index)
        y = self.y_at(point.value)
        tip_x, tip_y = self.tooltip_origin(region.index)
        return (
            f'<g class="mlc-point" data-index="{region.index}" data-key="{escape(point.key)}">'
            f'<rect class="mlc-hit" x="{region.x:.2f}" y="{region.y:.2f}" '
            f'width="{region.width:.2f}" height="{region.height:.2f}" fill="transparent"/>'
            '<g class="mlc-hover">'
            f'<line x1="{x:.2f}" x2="{x:.2f}" y1="{cfg.pad_top}" '
            f'y2="{self.plot_bottom:.2f}" stroke="rgba(255,255,255,0.10)"/>'
            f'<circle class="mlc-highlight" cx="{x:.2f}" cy="{y:.2f}" r="6" fill="{_HOVER_FILL}"/>'
            f'<g class="mlc-tooltip" transform="translate({tip_x:.2f}, {tip_y:.2f})">'
            f'<rect width="{cfg.tooltip_width}" height="{cfg.tooltip_height}" rx="12" '
            'fill="rgba(0,0,0,0.55)" stroke="rgba(255,255,255,0.16)"/>'
            f'<text x="12" y="22" font-size="12" fill="rgba(255,255,255,0.72)">'
            f"{escape(point.full_label or point.label)}</text>"
            f'<text x="12" y="42" font-size="16" fill="rgba(255,255,255,0.92)">'
            f"{escape(format_compact(point.value))}</text>"
            "</g></g></g>"
        )

    def render_svg(self) -> str:
        """
        SVG 마크업을 만듭니다.

        그리는 순서: 격자 → 영역/라인 → x축 라벨 → 마커 → 지점별 호버 그룹.

        Returns:
            한 줄짜리 SVG 문자열 (Markdown 렌더러가 들여쓰기를 코드로 해석하지 않도록)
        """
        cfg = self.config
        gradient_id = f"{self.chart_id}-fill"
        return (
            f'<svg id="{self.chart_id}" viewBox="0 0 {cfg.width} {cfg.height}" width="100%" '
            f'height="{self.height}" role="img" aria-label="Monthly chart" style="display:block">'
            f"{self._style_block()}"
            f'<defs><linearGradient id="{gradient_id}" x1="0" y1="0" x2="0" y2="1">'
            f'<stop offset="0%" stop-color="{self.color}" stop-opacity="0.30"/>'
            f'<stop offset="100%" stop-color="{self.color}" stop-opacity="0.02"/>'
            "</linearGradient></defs>"
            f"{self._grid()}"
            f'<path d="{self.area_path()}" fill="url(#{gradient_id})"/>'
            f'<path d="{self.line_path()}" fill="none" stroke="{self.color}" stroke-width="3" '
            'stroke-linejoin="round" stroke-linecap="round"/>'
            f"{self._x_labels()}"
            f"{self._markers()}"
            + "".join(self._point_group(region) for region in self.hit_regions())
            + "</svg>"
        )

    def to_html(self) -> str:
        """차트 HTML. 지점이 없으면 안내 문구를 표시합니다."""
        if not self.points:
            return (
                f'<div class="mlc-empty" style="width:100%;height:{self.height}px;display:grid;'
                f'place-items:center;color:rgba(255,255,255,0.70);'
                f'background:{_PANEL_BACKGROUND};border-radius:14px;">{EMPTY_MESSAGE}</div>'
            )
        return (
            f'<div class="mlc-wrap" style="width:100%;background:{_PANEL_BACKGROUND};'
            f'border-radius:14px;padding:6px 4px;">{self.render_svg()}</div>'
        )
