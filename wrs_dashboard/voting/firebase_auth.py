"""Firebase Identity Toolkit REST 호출 (이메일/비밀번호 가입·로그인)."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..domain.exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

ID_TOOLKIT = "https://identitytoolkit.googleapis.com/v1"

_TIMEOUT_SECONDS = 20.0


def error_message(response: requests.Response, fallback: str) -> str:
    """응답 본문의 error.message를 꺼냅니다. 없으면 fallback."""
    try:
        data = response.json()
    except ValueError:
        return fallback
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return fallback


def _post_json(
    url: str,
    body: Dict[str, Any],
    *,
    params: Dict[str, str],
    session: Optional[requests.Session],
) -> Dict[str, Any]:
    http = session if session is not None else requests
    try:
        response = http.post(url, params=params, json=body, timeout=_TIMEOUT_SECONDS)
    except requests.RequestException as exc:
        raise AuthenticationError(f"Request failed ({exc})") from exc

    if not response.ok:
        raise AuthenticationError(
            error_message(response, f"Request failed ({response.status_code})")
        )
    try:
        data = response.json()
    except ValueError:
        data = {}
    return data if isinstance(data, dict) else {}


def _account_call(
    action: str,
    *,
    api_key: str,
    email: str,
    password: str,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    if not api_key:
        raise ConfigurationError("Firebase auth is not configured (missing API key)")
    logger.info(f"Identity Toolkit {action} for {email}")
    return _post_json(
        f"{ID_TOOLKIT}/accounts:{action}",
        {"email": email, "password": password, "returnSecureToken": True},
        params={"key": api_key},
        session=session,
    )


def sign_up_email_password(
    *, api_key: str, email: str, password: str, session: Optional[requests.Session] = None
) -> Dict[str, Any]:
    """신규 계정을 만들고 idToken/localId/email이 담긴 응답을 반환합니다."""
    return _account_call("signUp", api_key=api_key, email=email, password=password, session=session)


def sign_in_email_password(
    *, api_key: str, email: str, password: str, session: Optional[requests.Session] = None
) -> Dict[str, Any]:
    """기존 계정으로 로그인합니다."""
    return _account_call(
        "signInWithPassword", api_key=api_key, email=email, password=password, session=session
    )
