"""
Warehouse & Retail Sales 대시보드 패키지

Montgomery County 공개 판매 데이터셋을 월별로 집계하여 차트로 보여주고,
카테고리/지표 선택 상태를 컨텍스트로 하는 투표를 기록합니다.
주요 구성:
- 도메인 모델과 집계 로직(analytics)은 Streamlit에 의존하지 않음
- 원격 호출(Socrata, Firebase)은 data_sources / voting 계층으로 격리
- Streamlit 렌더링은 ui 계층에만 존재
"""

from __future__ import annotations

__version__ = "1.0.0"
