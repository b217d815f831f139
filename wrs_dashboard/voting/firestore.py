"""Firestore REST 호출 (투표 문서 생성)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import requests

from ..domain.exceptions import ConfigurationError, VoteWriteError
from ..domain.models import VoteContext
from .firebase_auth import error_message

logger = logging.getLogger(__name__)

FIRESTORE_BASE = "https://firestore.googleapis.com/v1"

_TIMEOUT_SECONDS = 20.0


def votes_collection_url(project_id: str) -> str:
    return f"{FIRESTORE_BASE}/projects/{project_id}/databases/(default)/documents/votes"


def vote_document(
    *,
    stance: str,
    email: Optional[str],
    context: VoteContext,
    created_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Firestore typed-field 형식의 투표 문서 본문."""
    ts = created_at or datetime.now(timezone.utc)
    return {
        "fields": {
            "stance": {"stringValue": stance},
            "email": {"stringValue": email or "unknown"},
            "dataset": {"stringValue": context.dataset or ""},
            "category": {"stringValue": context.category or ""},
            "metric": {"stringValue": context.metric or ""},
            "createdAt": {"timestampValue": ts.isoformat().replace("+00:00", "Z")},
        }
    }


def write_vote(
    *,
    project_id: str,
    id_token: str,
    email: Optional[str],
    stance: str,
    context: VoteContext,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """
    votes 컬렉션에 투표 문서를 생성합니다.

    Args:
        project_id: Firebase 프로젝트 ID
        id_token: 로그인 시 받은 idToken (Bearer 인증)
        email: 투표자 이메일
        stance: "support" | "against"
        context: 데이터셋/카테고리/지표

    Returns:
        생성된 문서 JSON

    Raises:
        ConfigurationError: project_id가 없는 경우
        VoteWriteError: 네트워크 오류 또는 2xx가 아닌 응답
    """
    if not project_id:
        raise ConfigurationError("Firestore not configured (missing project id)")

    http = session if session is not None else requests
    body = vote_document(stance=stance, email=email, context=context)
    try:
        response = http.post(
            votes_collection_url(project_id),
            json=body,
            headers={"Authorization": f"Bearer {id_token}"},
            timeout=_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        raise VoteWriteError(f"Vote write failed ({exc})") from exc

    if not response.ok:
        message = error_message(response, f"Vote write failed ({response.status_code})")
        logger.warning(f"Firestore write rejected: {message}")
        raise VoteWriteError(message)

    try:
        data = response.json()
    except ValueError:
        data = {}
    return data if isinstance(data, dict) else {}
