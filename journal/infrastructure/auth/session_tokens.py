"""
Session Tokens
==============

Signed JWTs issued after a successful federated sign-in. The token carries
the principal so requests can be authorized without calling Google again.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from journal.domain.exceptions import InvalidCredential
from journal.domain.models.auth import Principal


class SessionTokenCodec:
    """Encode a Principal into a session token and back."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        if not secret_key:
            raise RuntimeError("SESSION_SECRET_KEY not set. Please configure it in your .env file.")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expire_minutes = expire_minutes

    def encode(self, principal: Principal) -> str:
        issued_at = datetime.now(timezone.utc)
        payload = {
            "sub": principal.uid,
            "email": principal.email,
            "name": principal.display_name,
            "picture": principal.photo_url,
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> Principal:
        """
        Validate a session token and return its principal.

        Raises:
            InvalidCredential: If the signature is wrong, the token expired,
                or the subject is missing
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as e:
            raise InvalidCredential("Invalid or expired session token") from e

        subject = payload.get("sub")
        if not subject:
            raise InvalidCredential("Session token has no subject")

        return Principal(
            uid=subject,
            email=payload.get("email"),
            display_name=payload.get("name"),
            photo_url=payload.get("picture"),
        )
