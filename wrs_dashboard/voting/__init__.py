"""
투표/인증 계층

원격 신원·문서 저장소(RemoteSink)와 로컬 우선 투표 서비스를 제공합니다.
원격 설정이 없으면 LocalOnlySink로 동작하며, 대시보드 핵심 기능은 영향을 받지 않습니다.
"""

from .service import (
    AUTH_MODE_SIGN_IN,
    AUTH_MODE_SIGN_UP,
    VoteOutcome,
    authenticate,
    cast_vote,
    local_demo_identity,
    sign_out,
)
from .sink import FirebaseRemoteSink, LocalOnlySink, RemoteSink, build_remote_sink

__all__ = [
    # 원격 저장소
    "RemoteSink",
    "LocalOnlySink",
    "FirebaseRemoteSink",
    "build_remote_sink",
    # 서비스
    "AUTH_MODE_SIGN_IN",
    "AUTH_MODE_SIGN_UP",
    "VoteOutcome",
    "authenticate",
    "cast_vote",
    "local_demo_identity",
    "sign_out",
]
