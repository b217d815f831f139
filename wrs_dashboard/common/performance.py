"""
성능 모니터링 유틸리티

데이터 조회, 집계 파이프라인 등 코드 블록의 실행 시간을 로깅합니다.
"""

from __future__ import annotations

import logging
import time
from typing import Any

logger = logging.getLogger(__name__)

# 경고/에러 로그 임계값 (초)
SLOW_WARNING_SECONDS = 1.0
SLOW_ERROR_SECONDS = 10.0


def measure_time_context(operation_name: str) -> PerformanceContext:
    """
    컨텍스트 매니저를 사용한 코드 블록 성능 측정.

    Args:
        operation_name: 측정할 작업의 이름

    Returns:
        PerformanceContext 인스턴스

    Examples:
        >>> with measure_time_context("Socrata fetch"):
        ...     rows = fetch_sales_aggregates()
        INFO - Socrata fetch completed in 0.84s
    """
    return PerformanceContext(operation_name)


class PerformanceContext:
    """
    코드 블록의 실행 시간을 측정하는 컨텍스트 매니저.

    Attributes:
        operation_name: 측정할 작업의 이름
        elapsed: 경과 시간 (초), 블록 종료 후 채워짐
    """

    def __init__(self, operation_name: str) -> None:
        self.operation_name = operation_name
        self._started: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> PerformanceContext:
        self._started = time.perf_counter()
        logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.elapsed = time.perf_counter() - self._started

        if exc_type is not None:
            logger.error(f"❌ {self.operation_name} failed after {self.elapsed:.2f}s")
        elif self.elapsed >= SLOW_ERROR_SECONDS:
            logger.error(f"⚠️  SLOW: {self.operation_name} took {self.elapsed:.2f}s")
        elif self.elapsed >= SLOW_WARNING_SECONDS:
            logger.warning(f"⏱️  {self.operation_name} took {self.elapsed:.2f}s")
        else:
            logger.info(f"✓ {self.operation_name} completed in {self.elapsed:.2f}s")
