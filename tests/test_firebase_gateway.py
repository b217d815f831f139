"""
Firebase REST 게이트웨이 테스트

Identity Toolkit / Firestore 호출을 Mock 세션으로 검증합니다.
"""
from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest
import requests

from wrs_dashboard.core.config import FirebaseSettings
from wrs_dashboard.domain.exceptions import AuthenticationError, ConfigurationError, VoteWriteError
from wrs_dashboard.domain.models import AuthIdentity, VoteContext
from wrs_dashboard.voting import FirebaseRemoteSink, LocalOnlySink, build_remote_sink
from wrs_dashboard.voting.firebase_auth import (
    error_message,
    sign_in_email_password,
    sign_up_email_password,
)
from wrs_dashboard.voting.firestore import vote_document, votes_collection_url, write_vote

CONTEXT = VoteContext(dataset="Sales", category="WINE", metric="total")


def _response(status=200, payload=None):
    response = Mock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.json.return_value = payload if payload is not None else {}
    return response


# ----------------------------------------------------------------------
# Identity Toolkit
# ----------------------------------------------------------------------

def test_sign_up_posts_credentials_with_key():
    session = Mock()
    session.post.return_value = _response(payload={"idToken": "t", "localId": "u", "email": "a@b.c"})

    data = sign_up_email_password(api_key="KEY", email="a@b.c", password="pw", session=session)

    assert data["idToken"] == "t"
    args, kwargs = session.post.call_args
    assert args[0].endswith("/accounts:signUp")
    assert kwargs["params"] == {"key": "KEY"}
    assert kwargs["json"] == {"email": "a@b.c", "password": "pw", "returnSecureToken": True}


def test_sign_in_uses_password_endpoint():
    session = Mock()
    session.post.return_value = _response(payload={"idToken": "t"})

    sign_in_email_password(api_key="KEY", email="a@b.c", password="pw", session=session)

    assert session.post.call_args[0][0].endswith("/accounts:signInWithPassword")


def test_auth_error_message_from_body():
    session = Mock()
    session.post.return_value = _response(400, {"error": {"message": "EMAIL_EXISTS"}})

    with pytest.raises(AuthenticationError, match="EMAIL_EXISTS"):
        sign_up_email_password(api_key="KEY", email="a@b.c", password="pw", session=session)


def test_auth_error_fallback_message():
    session = Mock()
    session.post.return_value = _response(500, {})

    with pytest.raises(AuthenticationError, match=r"Request failed \(500\)"):
        sign_in_email_password(api_key="KEY", email="a@b.c", password="pw", session=session)


def test_auth_network_error():
    session = Mock()
    session.post.side_effect = requests.Timeout("slow")

    with pytest.raises(AuthenticationError):
        sign_in_email_password(api_key="KEY", email="a@b.c", password="pw", session=session)


def test_missing_api_key_is_configuration_error():
    session = Mock()
    with pytest.raises(ConfigurationError):
        sign_up_email_password(api_key="", email="a@b.c", password="pw", session=session)
    session.post.assert_not_called()


def test_error_message_with_invalid_json():
    response = Mock()
    response.json.side_effect = ValueError("not json")
    assert error_message(response, "fallback") == "fallback"


# ----------------------------------------------------------------------
# Firestore
# ----------------------------------------------------------------------

def test_vote_document_fields():
    created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    doc = vote_document(stance="support", email=None, context=CONTEXT, created_at=created)

    fields = doc["fields"]
    assert fields["stance"] == {"stringValue": "support"}
    assert fields["email"] == {"stringValue": "unknown"}
    assert fields["dataset"] == {"stringValue": "Sales"}
    assert fields["category"] == {"stringValue": "WINE"}
    assert fields["metric"] == {"stringValue": "total"}
    assert fields["createdAt"] == {"timestampValue": "2024-01-02T03:04:05Z"}


def test_write_vote_uses_bearer_token():
    session = Mock()
    session.post.return_value = _response(200, {"name": "projects/p/databases/(default)/documents/votes/1"})

    write_vote(
        project_id="proj",
        id_token="TOKEN",
        email="a@b.c",
        stance="against",
        context=CONTEXT,
        session=session,
    )

    args, kwargs = session.post.call_args
    assert args[0] == votes_collection_url("proj")
    assert args[0].endswith("/projects/proj/databases/(default)/documents/votes")
    assert kwargs["headers"] == {"Authorization": "Bearer TOKEN"}
    assert kwargs["json"]["fields"]["stance"] == {"stringValue": "against"}


def test_write_vote_failure():
    session = Mock()
    session.post.return_value = _response(403, {"error": {"message": "PERMISSION_DENIED"}})

    with pytest.raises(VoteWriteError, match="PERMISSION_DENIED"):
        write_vote(
            project_id="proj", id_token="T", email="a@b.c", stance="support", context=CONTEXT, session=session
        )


def test_write_vote_requires_project_id():
    with pytest.raises(ConfigurationError):
        write_vote(project_id="", id_token="T", email="a@b.c", stance="support", context=CONTEXT)


# ----------------------------------------------------------------------
# RemoteSink 선택
# ----------------------------------------------------------------------

def test_build_remote_sink_without_settings_is_local_only():
    sink = build_remote_sink(FirebaseSettings())

    assert isinstance(sink, LocalOnlySink)
    assert not sink.auth_enabled
    assert not sink.persistence_enabled
    with pytest.raises(ConfigurationError):
        sink.sign_in("a@b.c", "pw")


@pytest.mark.parametrize(
    "settings, auth, persistence",
    [
        (FirebaseSettings(api_key="KEY"), True, False),
        (FirebaseSettings(project_id="proj"), False, True),
        (FirebaseSettings(api_key="KEY", project_id="proj"), True, True),
    ],
)
def test_build_remote_sink_capabilities(settings, auth, persistence):
    sink = build_remote_sink(settings)

    assert isinstance(sink, FirebaseRemoteSink)
    assert sink.auth_enabled is auth
    assert sink.persistence_enabled is persistence


def test_firebase_sink_builds_identity_from_response():
    session = Mock()
    session.post.return_value = _response(payload={"idToken": "tok", "localId": "uid"})
    sink = FirebaseRemoteSink(FirebaseSettings(api_key="KEY"), session=session)

    identity = sink.sign_up("a@b.c", "pw")

    assert identity == AuthIdentity(email="a@b.c", id_token="tok", local_id="uid")
    assert not identity.is_local


@pytest.mark.parametrize("payload", [{"localId": "uid"}, {"idToken": "", "localId": "uid"}])
def test_firebase_sink_rejects_response_without_token(payload):
    session = Mock()
    session.post.return_value = _response(payload=payload)
    sink = FirebaseRemoteSink(FirebaseSettings(api_key="KEY"), session=session)

    with pytest.raises(AuthenticationError, match="ID token"):
        sink.sign_in("a@b.c", "pw")
