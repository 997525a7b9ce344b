"""
Identity Provider Adapters
==========================

Federated sign-in is delegated to Google. The adapter only verifies the ID
token the browser obtained from Google and maps its claims to a Principal.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from google.auth.exceptions import GoogleAuthError, TransportError
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from journal.domain.exceptions import InvalidCredential
from journal.domain.models.auth import Principal

logger = logging.getLogger(__name__)

GOOGLE_ISSUERS = ("accounts.google.com", "https://accounts.google.com")


class IdentityProviderUnavailable(Exception):
    """The identity provider could not be reached to verify a credential."""


class IdentityProvider(ABC):
    """Verifies a credential issued by a third-party identity provider."""

    @abstractmethod
    def verify(self, credential: str) -> Principal:
        """
        Verify a credential and return the principal it identifies.

        Raises:
            InvalidCredential: If the credential is malformed, expired or forged
            IdentityProviderUnavailable: If verification could not be performed
        """
        pass


class GoogleIdentityProvider(IdentityProvider):
    """
    Google Sign-In ID token verification.

    Args:
        client_id: OAuth client id the tokens must be issued for. When None
            the audience is not checked (local development only).
    """

    def __init__(self, client_id: Optional[str]):
        self.client_id = client_id
        self._request = google_requests.Request()
        if not client_id:
            logger.warning("GOOGLE_CLIENT_ID not set; ID token audience will not be checked")

    def verify(self, credential: str) -> Principal:
        if not credential:
            raise InvalidCredential("Missing Google credential")

        try:
            claims = id_token.verify_oauth2_token(credential, self._request, self.client_id)
        except TransportError as e:
            logger.error("Could not reach Google to verify ID token: %s", e)
            raise IdentityProviderUnavailable("Google sign-in is unavailable") from e
        except (ValueError, GoogleAuthError) as e:
            logger.warning("Google ID token rejected: %s", e)
            raise InvalidCredential("Invalid Google credential") from e

        if claims.get("iss") not in GOOGLE_ISSUERS:
            logger.warning("Google ID token has unexpected issuer %r", claims.get("iss"))
            raise InvalidCredential("Invalid Google credential")

        subject = claims.get("sub")
        if not subject:
            raise InvalidCredential("Google credential has no subject")

        logger.info("Google ID token verified for %s", claims.get("email") or subject)
        return Principal(
            uid=subject,
            email=claims.get("email"),
            display_name=claims.get("name"),
            photo_url=claims.get("picture"),
        )
