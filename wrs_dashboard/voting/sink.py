"""Unified remote sink interfaces for identity and vote persistence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import requests

from ..core.config import FirebaseSettings
from ..domain.exceptions import AuthenticationError, ConfigurationError
from ..domain.models import AuthIdentity, VoteContext
from . import firebase_auth, firestore


class RemoteSink(Protocol):
    """Capabilities exposed by a remote identity/document store."""

    @property
    def auth_enabled(self) -> bool:  # pragma: no cover - interface definition
        ...

    @property
    def persistence_enabled(self) -> bool:  # pragma: no cover - interface definition
        ...

    def sign_up(self, email: str, password: str) -> AuthIdentity:  # pragma: no cover
        ...

    def sign_in(self, email: str, password: str) -> AuthIdentity:  # pragma: no cover
        ...

    def write_vote(
        self, identity: AuthIdentity, stance: str, context: VoteContext
    ) -> None:  # pragma: no cover
        ...


@dataclass(frozen=True)
class LocalOnlySink:
    """Sink used when no remote service is configured; every call is refused."""

    auth_enabled: bool = False
    persistence_enabled: bool = False

    def sign_up(self, email: str, password: str) -> AuthIdentity:
        raise ConfigurationError("Remote authentication is not configured")

    def sign_in(self, email: str, password: str) -> AuthIdentity:
        raise ConfigurationError("Remote authentication is not configured")

    def write_vote(self, identity: AuthIdentity, stance: str, context: VoteContext) -> None:
        raise ConfigurationError("Remote vote persistence is not configured")


class FirebaseRemoteSink:
    """
    Firebase Identity Toolkit + Firestore REST 구현.

    API 키가 있으면 인증, 프로젝트 ID가 있으면 투표 저장이 활성화됩니다.
    """

    def __init__(
        self,
        settings: FirebaseSettings,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings
        self.session = session

    @property
    def auth_enabled(self) -> bool:
        return self.settings.auth_enabled

    @property
    def persistence_enabled(self) -> bool:
        return self.settings.persistence_enabled

    def _identity(self, data: dict, email: str) -> AuthIdentity:
        id_token = data.get("idToken")
        if not isinstance(id_token, str) or not id_token:
            raise AuthenticationError("Auth response did not include an ID token.")
        return AuthIdentity(
            email=str(data.get("email") or email),
            id_token=id_token,
            local_id=str(data.get("localId") or ""),
        )

    def sign_up(self, email: str, password: str) -> AuthIdentity:
        data = firebase_auth.sign_up_email_password(
            api_key=self.settings.api_key, email=email, password=password, session=self.session
        )
        return self._identity(data, email)

    def sign_in(self, email: str, password: str) -> AuthIdentity:
        data = firebase_auth.sign_in_email_password(
            api_key=self.settings.api_key, email=email, password=password, session=self.session
        )
        return self._identity(data, email)

    def write_vote(self, identity: AuthIdentity, stance: str, context: VoteContext) -> None:
        firestore.write_vote(
            project_id=self.settings.project_id,
            id_token=identity.id_token,
            email=identity.email,
            stance=stance,
            context=context,
            session=self.session,
        )


def build_remote_sink(
    settings: FirebaseSettings,
    *,
    session: Optional[requests.Session] = None,
) -> RemoteSink:
    """설정이 하나도 없으면 LocalOnlySink, 하나라도 있으면 FirebaseRemoteSink."""
    if not settings.auth_enabled and not settings.persistence_enabled:
        return LocalOnlySink()
    return FirebaseRemoteSink(settings, session=session)
