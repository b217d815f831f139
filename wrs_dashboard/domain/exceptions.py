"""
도메인 계층 예외 정의

데이터 조회, 인증, 투표 저장 과정에서 발생할 수 있는 예외를 정의합니다.
UI 계층은 이 예외들을 잡아서 화면 배너로 변환하며, 어떤 예외도
대시보드 전체를 중단시키지 않습니다.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class DataLoadError(DomainError):
    """
    데이터셋 조회 실패 시 발생하는 예외.

    네트워크 오류, 2xx가 아닌 HTTP 응답, JSON 파싱 실패를 포함합니다.
    HTTP 응답이 있었던 경우 ``status``에 상태 코드가 담깁니다.
    """

    def __init__(self, message: str, *, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class FetchCancelled(DomainError):
    """조회가 취소되어 결과를 버려야 할 때 발생합니다. 사용자에게 표시하지 않습니다."""

    pass


class AuthenticationError(DomainError):
    """
    회원가입/로그인 실패.

    입력 누락이나 원격 인증 서비스의 오류 메시지를 그대로 전달합니다.
    """

    pass


class VoteWriteError(DomainError):
    """원격 투표 저장 실패. 로컬에 기록된 투표는 유지됩니다."""

    pass


class ConfigurationError(DomainError):
    """필요한 원격 연동 설정(API 키, 프로젝트 ID)이 없을 때 발생합니다."""

    pass
