"""공통 유틸리티 모듈.

단계별 소요 시간 로깅을 제공합니다.
"""

from .performance import PerformanceContext, measure_time_context

__all__ = [
    "measure_time_context",
    "PerformanceContext",
]
