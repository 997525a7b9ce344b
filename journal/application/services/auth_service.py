"""
Auth Service
============

Sign-in, sign-out and session resolution on top of the identity provider
adapter and the session token codec.
"""
import logging
from typing import Optional, Tuple

from journal.domain.models.auth import AuthSession
from journal.infrastructure.auth.identity_provider import IdentityProvider
from journal.infrastructure.auth.session_tokens import SessionTokenCodec

logger = logging.getLogger(__name__)


class AuthService:
    """Turns credentials and session tokens into explicit AuthSession objects."""

    def __init__(self, identity_provider: IdentityProvider, token_codec: SessionTokenCodec):
        self._identity_provider = identity_provider
        self._token_codec = token_codec

    @property
    def session_max_age_seconds(self) -> int:
        return self._token_codec.expire_minutes * 60

    def sign_in(self, credential: str) -> Tuple[AuthSession, str]:
        """
        Verify a federated credential and open a session.

        Args:
            credential: ID token obtained from the identity provider

        Returns:
            The authenticated session and its signed session token

        Raises:
            InvalidCredential: If the provider rejects the credential
        """
        principal = self._identity_provider.verify(credential)
        logger.info("Principal %r signed in", principal.uid)
        return AuthSession.authenticated(principal), self._token_codec.encode(principal)

    def resolve(self, token: Optional[str]) -> AuthSession:
        """
        Resolve the session for a request.

        No token means an anonymous session. A token that fails validation
        raises InvalidCredential rather than silently downgrading.
        """
        if not token:
            return AuthSession.anonymous()
        return AuthSession.authenticated(self._token_codec.decode(token))

    def sign_out(self, session: AuthSession) -> AuthSession:
        """Close a session. Session tokens are stateless; the caller drops the cookie."""
        if session.is_authenticated:
            logger.info("Principal %r signed out", session.principal.uid)
        session.clear()
        return session
