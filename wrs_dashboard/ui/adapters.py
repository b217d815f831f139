"""
도메인 예외 → UI 메시지 어댑터

도메인 계층에서 발생하는 예외를 잡아서 Streamlit 배너로 변환합니다.
어떤 예외도 페이지 전체를 중단시키지 않습니다.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

import streamlit as st

from ..domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DataLoadError,
    DomainError,
    FetchCancelled,
    VoteWriteError,
)

logger = logging.getLogger(__name__)


def dataset_error_message(message: str) -> str:
    return f"Couldn’t load the dataset. ({message})" if message else "Couldn’t load the dataset."


@contextmanager
def handle_domain_errors() -> Generator[None, None, None]:
    """
    도메인 예외를 잡아서 Streamlit 메시지로 변환하는 컨텍스트 매니저.

    Notes:
        - DataLoadError: 빨간색 에러 (재시도 없음)
        - AuthenticationError: 빨간색 에러 (폼은 계속 사용 가능)
        - VoteWriteError: 노란색 경고 (로컬 투표는 유지)
        - ConfigurationError: 안내 메시지
        - FetchCancelled: 표시하지 않음
    """
    try:
        yield

    except FetchCancelled:
        logger.debug("Cancelled fetch ignored by UI")

    except DataLoadError as e:
        st.error(dataset_error_message(str(e)))

    except AuthenticationError as e:
        st.error(str(e))

    except VoteWriteError as e:
        st.warning(f"Vote saved locally, but the remote write failed: {e}")

    except ConfigurationError as e:
        st.info(str(e))

    except DomainError as e:
        st.error(f"❌ {type(e).__name__}: {e}")

    except Exception as e:
        # 예상치 못한 예외: 상세 정보와 함께 표시
        logger.exception("Unexpected error while rendering dashboard")
        st.error(f"❌ 예상치 못한 오류가 발생했습니다: {type(e).__name__}: {str(e)}")
        st.exception(e)
