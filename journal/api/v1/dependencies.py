"""
Dependency Container
====================

FastAPI dependencies: services from the DI container and the explicit
AuthSession for the current request.
"""
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from journal.application.services.auth_service import AuthService
from journal.application.services.entry_service import EntryService
from journal.core.config import get_settings
from journal.di.container import get_container
from journal.domain.exceptions import InvalidCredential
from journal.domain.models.auth import AuthSession

# Authorization header is accepted for API clients; the cookie wins when both are sent
bearer_scheme = HTTPBearer(auto_error=False)


def get_entry_service() -> EntryService:
    """
    Get entry service instance (singleton).

    Returns:
        EntryService instance
    """
    return get_container().get(EntryService)


def get_auth_service() -> AuthService:
    """
    Get auth service instance (singleton).

    Returns:
        AuthService instance
    """
    return get_container().get(AuthService)


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Extract the session token from the session cookie or the bearer header."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    if credentials:
        return credentials.credentials
    return None


def get_auth_session(
    token: Optional[str] = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthSession:
    """
    Resolve the AuthSession for this request.

    Requests without a token get an anonymous session; a token that fails
    validation is rejected with 401.
    """
    try:
        return auth_service.resolve(token)
    except InvalidCredential as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_auth_session(session: AuthSession = Depends(get_auth_session)) -> AuthSession:
    """Require an authenticated session."""
    if not session.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Sign in to access journal entries",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session
