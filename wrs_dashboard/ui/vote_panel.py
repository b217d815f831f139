"""
회원가입/로그인 + 투표 패널

로그인 신원과 최근 투표는 사용자별 상태 저장소(SessionStateStore)에서 읽고 씁니다.
투표는 로컬 우선으로 기록되고 원격 저장 실패는 경고로만 표시됩니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import streamlit as st

from ..data_sources.storage import SessionStateStore, load_identity, load_vote
from ..domain.exceptions import AuthenticationError
from ..domain.models import STANCE_AGAINST, STANCE_SUPPORT, VoteRecord
from ..voting import (
    AUTH_MODE_SIGN_IN,
    AUTH_MODE_SIGN_UP,
    RemoteSink,
    authenticate,
    cast_vote,
    sign_out,
)

logger = logging.getLogger(__name__)

_VOTE_ERROR_KEY = "wrs_vote_error"
_AUTH_MODE_KEY = "wrs_auth_mode"
_AUTH_ERROR_KEY = "wrs_auth_error"


def format_vote_time(at: str) -> str:
    """ISO 시각을 로컬 시간 "YYYY-MM-DD HH:MM:SS"로 표시합니다. 파싱 실패 시 원문."""
    try:
        return datetime.fromisoformat(at).astimezone().strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return at


def vote_message(vote: VoteRecord) -> str:
    lead = (
        "**Thank you for your support.**"
        if vote.stance == STANCE_SUPPORT
        else "**Thanks for participating.**"
    )
    return f"{lead} Your vote was recorded on {format_vote_time(vote.at)}."


def _init_state() -> None:
    st.session_state.setdefault(_VOTE_ERROR_KEY, None)
    st.session_state.setdefault(_AUTH_MODE_KEY, AUTH_MODE_SIGN_UP)
    st.session_state.setdefault(_AUTH_ERROR_KEY, None)


def _render_vote_buttons(
    *,
    store: SessionStateStore,
    sink: RemoteSink,
    category: str,
    metric: str,
) -> None:
    col_support, col_against = st.columns(2)
    stance: Optional[str] = None
    if col_support.button(
        "Support", type="primary", use_container_width=True, key="wrs_vote_support"
    ):
        stance = STANCE_SUPPORT
    if col_against.button("Against", use_container_width=True, key="wrs_vote_against"):
        stance = STANCE_AGAINST

    if stance is not None:
        outcome = cast_vote(
            store,
            sink,
            load_identity(store),
            stance,
            category=category,
            metric=metric,
        )
        st.session_state[_VOTE_ERROR_KEY] = outcome.remote_error

    vote = load_vote(store)
    if vote is not None:
        if vote.stance == STANCE_SUPPORT:
            st.success(vote_message(vote))
        else:
            st.info(vote_message(vote))

    remote_error = st.session_state[_VOTE_ERROR_KEY]
    if remote_error:
        st.warning(f"Vote saved locally, but the remote write failed: **{remote_error}**")


def _render_auth_form(*, store: SessionStateStore, sink: RemoteSink) -> None:
    mode = st.session_state[_AUTH_MODE_KEY]
    submit_label = "Sign in" if mode == AUTH_MODE_SIGN_IN else "Sign up (Register)"

    with st.form("wrs_auth_form", clear_on_submit=False):
        email = st.text_input("Email", placeholder="you@example.com", key="wrs_auth_email")
        password = st.text_input("Password", type="password", key="wrs_auth_password")
        submitted = st.form_submit_button(submit_label, type="primary")

    if submitted:
        st.session_state[_AUTH_ERROR_KEY] = None
        try:
            with st.spinner("Working…"):
                authenticate(sink, mode, email, password, store=store)
        except AuthenticationError as exc:
            logger.info(f"Authentication failed: {exc}")
            st.session_state[_AUTH_ERROR_KEY] = str(exc)
        else:
            st.rerun()

    other = AUTH_MODE_SIGN_UP if mode == AUTH_MODE_SIGN_IN else AUTH_MODE_SIGN_IN
    other_label = "Sign up" if other == AUTH_MODE_SIGN_UP else "Sign in"
    if st.button(f"Switch to {other_label}"):
        st.session_state[_AUTH_MODE_KEY] = other
        st.session_state[_AUTH_ERROR_KEY] = None
        st.rerun()

    if st.session_state[_AUTH_ERROR_KEY]:
        st.error(st.session_state[_AUTH_ERROR_KEY])

    if not sink.auth_enabled:
        st.info(
            "To enable real Firebase Auth (email/password), add `web_api_key` to the "
            "`[firebase]` section of `.streamlit/secrets.toml` (or set `FIREBASE_WEB_API_KEY`) "
            "and enable Email/Password in the Firebase Console."
        )


def _render_identity(*, store: SessionStateStore, sink: RemoteSink) -> None:
    identity = load_identity(store)
    if identity is None:
        _render_auth_form(store=store, sink=sink)
        return

    st.success(f"Logged in as **{identity.email}**.")
    if st.button("Log out"):
        sign_out(store)
        st.rerun()
    if identity.is_local:
        st.caption("Note: Firebase Auth API key not found, so this is local demo mode.")


def render_vote_panel(
    *,
    store: SessionStateStore,
    sink: RemoteSink,
    category: str,
    metric: str,
) -> None:
    """
    투표 버튼, 결과 메시지, 로그인 폼을 렌더링합니다.

    Args:
        store: 사용자별 상태 저장소
        sink: 원격 신원/문서 저장소
        category: 현재 카테고리 필터 (투표 컨텍스트)
        metric: 현재 지표 (투표 컨텍스트)
    """
    _init_state()

    st.subheader("Register + Vote")
    st.caption(
        "Support/Against buttons are available. If Firebase Auth isn’t configured yet, "
        "the form still works in local demo mode."
    )

    _render_vote_buttons(store=store, sink=sink, category=category, metric=metric)
    _render_identity(store=store, sink=sink)

    identity = load_identity(store)
    if identity is not None and not identity.is_local and sink.persistence_enabled:
        st.markdown(
            '<span class="wrs-pill">Remote vote logging: enabled</span>',
            unsafe_allow_html=True,
        )
