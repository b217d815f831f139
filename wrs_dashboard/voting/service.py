"""
투표/인증 서비스

투표는 항상 로컬에 먼저 기록하고, 원격 저장은 가능한 경우에만 시도합니다.
원격 저장이 실패해도 로컬 투표는 되돌리지 않으며, 실패 메시지만 돌려줍니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..core.config import DATASET_LABEL, LOCAL_DEMO_TOKEN
from ..data_sources.storage import SessionStateStore, save_identity, save_vote
from ..domain.exceptions import AuthenticationError, ConfigurationError, VoteWriteError
from ..domain.models import (
    STANCE_AGAINST,
    STANCE_SUPPORT,
    AuthIdentity,
    VoteContext,
    VoteRecord,
)
from .sink import RemoteSink

logger = logging.getLogger(__name__)

AUTH_MODE_SIGN_UP = "signup"
AUTH_MODE_SIGN_IN = "signin"

MISSING_CREDENTIALS_MESSAGE = "Please enter an email and password."


@dataclass(frozen=True)
class VoteOutcome:
    """
    투표 결과.

    Attributes:
        vote: 로컬에 기록된 투표 (항상 존재)
        mirrored: 원격 저장 성공 여부
        remote_error: 원격 저장 실패 메시지 (시도하지 않았거나 성공하면 None)
    """

    vote: VoteRecord
    mirrored: bool = False
    remote_error: Optional[str] = None


def local_demo_identity(email: str) -> AuthIdentity:
    return AuthIdentity(email=email, id_token=LOCAL_DEMO_TOKEN, local_id=LOCAL_DEMO_TOKEN)


def authenticate(
    sink: RemoteSink,
    mode: str,
    email: str,
    password: str,
    *,
    store: Optional[SessionStateStore] = None,
) -> AuthIdentity:
    """
    회원가입 또는 로그인을 수행합니다.

    인증 서비스가 설정되지 않았으면 입력한 이메일로 로컬 데모 신원을 만듭니다.

    Args:
        sink: 원격 신원/문서 저장소
        mode: "signup" | "signin"
        email: 이메일 (앞뒤 공백 제거)
        password: 비밀번호
        store: 주어지면 성공한 신원을 사용자별 상태에 저장

    Returns:
        AuthIdentity

    Raises:
        AuthenticationError: 입력 누락 또는 원격 인증 실패
    """
    trimmed = (email or "").strip()
    if not trimmed or not password:
        raise AuthenticationError(MISSING_CREDENTIALS_MESSAGE)

    if sink.auth_enabled:
        try:
            if mode == AUTH_MODE_SIGN_IN:
                identity = sink.sign_in(trimmed, password)
            else:
                identity = sink.sign_up(trimmed, password)
        except ConfigurationError as exc:
            raise AuthenticationError(str(exc)) from exc
        logger.info(f"Authenticated {identity.email} via remote identity service ({mode})")
    else:
        identity = local_demo_identity(trimmed)
        logger.info(f"Remote auth not configured, using local demo identity for {trimmed}")

    if store is not None:
        save_identity(store, identity)
    return identity


def sign_out(store: Optional[SessionStateStore]) -> None:
    """저장된 로그인 정보를 지웁니다."""
    if store is None:
        return
    save_identity(store, None)


def cast_vote(
    store: Optional[SessionStateStore],
    sink: RemoteSink,
    identity: Optional[AuthIdentity],
    stance: str,
    *,
    category: str,
    metric: str,
    dataset: str = DATASET_LABEL,
    now: Optional[datetime] = None,
) -> VoteOutcome:
    """
    투표를 기록합니다.

    1. 로컬(세션) 기록
    2. 원격 신원(로컬 데모 아님)이고 원격 저장이 활성화된 경우에만 원격 저장 시도
    3. 원격 실패는 remote_error로 보고, 로컬 투표는 유지

    Args:
        store: 사용자별 상태 저장소 (None이면 기록하지 않음)
        sink: 원격 저장소
        identity: 현재 로그인 신원 (없으면 원격 저장 생략)
        stance: "support" | "against"
        category: 현재 카테고리 필터
        metric: 현재 지표
        dataset: 데이터셋 이름
        now: 기록 시각 (테스트용)

    Returns:
        VoteOutcome

    Raises:
        ValueError: 알 수 없는 stance
    """
    if stance not in (STANCE_SUPPORT, STANCE_AGAINST):
        raise ValueError(f"Unknown stance: {stance!r}")

    # ========================================
    # 1단계: 로컬 기록
    # ========================================
    at = (now or datetime.now(timezone.utc)).isoformat()
    vote = VoteRecord(stance=stance, at=at, category=category, metric=metric)
    if store is not None:
        save_vote(store, vote)
    logger.info(f"Vote recorded locally: {stance} ({category}/{metric})")

    # ========================================
    # 2단계: 원격 저장 (best effort)
    # ========================================
    eligible = (
        identity is not None
        and bool(identity.id_token)
        and not identity.is_local
        and sink.persistence_enabled
    )
    if not eligible:
        return VoteOutcome(vote=vote)

    context = VoteContext(dataset=dataset, category=category, metric=metric)
    try:
        sink.write_vote(identity, stance, context)
    except (VoteWriteError, ConfigurationError) as exc:
        logger.warning(f"Remote vote write failed, keeping local vote: {exc}")
        return VoteOutcome(vote=vote, remote_error=str(exc))

    return VoteOutcome(vote=vote, mirrored=True)
