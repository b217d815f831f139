"""
사용자별 상태 저장소

로그인 정보와 최근 투표를 JSON 문자열로 Streamlit 세션 상태에 보관합니다.
세션 상태는 브라우저 세션마다 분리되므로 다른 사용자와 공유되지 않습니다.
값이 없거나 손상된 경우 예외 대신 기본값을 돌려줍니다.
"""

from __future__ import annotations

import json
import logging
from typing import Any, MutableMapping, Optional

import streamlit as st

from ..core.config import AUTH_STORAGE_KEY, VOTE_STORAGE_KEY
from ..domain.models import AuthIdentity, VoteRecord

logger = logging.getLogger(__name__)


class SessionStateStore:
    """
    키마다 하나의 JSON 문자열을 두는 key-value 저장소.

    Attributes:
        backing: 실제 저장 공간 (기본값: st.session_state, 테스트에서는 dict)
    """

    def __init__(self, backing: Optional[MutableMapping[str, Any]] = None) -> None:
        self.backing = backing if backing is not None else st.session_state

    def load(self, key: str, default: Any = None) -> Any:
        """저장된 값을 읽습니다. 없거나 손상되었으면 default."""
        raw = self.backing.get(key)
        if not isinstance(raw, str) or not raw.strip():
            return default
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Corrupt state entry for '{key}', falling back to default")
            return default

    def save(self, key: str, value: Any) -> None:
        """값을 JSON 문자열로 저장합니다."""
        self.backing[key] = json.dumps(value, ensure_ascii=False)


def load_identity(store: SessionStateStore) -> Optional[AuthIdentity]:
    """저장된 로그인 정보. 없거나 형식이 맞지 않으면 None."""
    data = store.load(AUTH_STORAGE_KEY)
    if not isinstance(data, dict):
        return None
    try:
        return AuthIdentity.from_mapping(data)
    except ValueError as exc:
        logger.warning(f"Ignoring malformed stored identity: {exc}")
        return None


def save_identity(store: SessionStateStore, identity: Optional[AuthIdentity]) -> None:
    store.save(AUTH_STORAGE_KEY, identity.to_dict() if identity is not None else None)


def load_vote(store: SessionStateStore) -> Optional[VoteRecord]:
    """저장된 투표. 없거나 형식이 맞지 않으면 None."""
    data = store.load(VOTE_STORAGE_KEY)
    if not isinstance(data, dict):
        return None
    try:
        return VoteRecord.from_mapping(data)
    except ValueError as exc:
        logger.warning(f"Ignoring malformed stored vote: {exc}")
        return None


def save_vote(store: SessionStateStore, vote: Optional[VoteRecord]) -> None:
    store.save(VOTE_STORAGE_KEY, vote.to_dict() if vote is not None else None)
