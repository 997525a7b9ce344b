"""
Auth Controller
===============

FastAPI controller for sign-in, sign-out and the current session.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from journal.api.v1.dependencies import get_auth_service, get_auth_session, get_session_token
from journal.application.dto.auth_dto import (
    GoogleSignInRequest,
    SessionResponse,
    SignInResponse,
    UserResponse,
)
from journal.application.services.auth_service import AuthService
from journal.core.config import get_settings
from journal.domain.exceptions import InvalidCredential
from journal.domain.models.auth import AuthSession
from journal.infrastructure.auth.identity_provider import IdentityProviderUnavailable

router = APIRouter(tags=["auth"])


@router.post(
    "/google",
    response_model=SignInResponse,
    summary="Sign in with Google",
    description="""
    Exchange a Google ID token for a session.

    The session token is set as an HttpOnly cookie and also returned in the
    body for API clients that send it as a bearer token.
    """
)
def sign_in_with_google(
    request: GoogleSignInRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
) -> SignInResponse:
    """Sign in with a Google ID token."""
    try:
        session, token = auth_service.sign_in(request.credential)
    except InvalidCredential as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except IdentityProviderUnavailable as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=auth_service.session_max_age_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )
    return SignInResponse(token=token, user=UserResponse.from_principal(session.principal))


@router.post(
    "/sign-out",
    response_model=SessionResponse,
    summary="Sign out",
    description="Clear the session cookie. Always succeeds, even with an expired session."
)
def sign_out(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> SessionResponse:
    """Sign out of the current session."""
    try:
        session = auth_service.resolve(token)
    except InvalidCredential:
        session = AuthSession.anonymous()

    session = auth_service.sign_out(session)
    response.delete_cookie(key=get_settings().session_cookie_name, path="/")
    return SessionResponse.from_session(session)


@router.get(
    "/me",
    response_model=SessionResponse,
    summary="Current session",
    description="Get the authentication state and display attributes of the current user."
)
def get_current_session(session: AuthSession = Depends(get_auth_session)) -> SessionResponse:
    """Get the current session."""
    return SessionResponse.from_session(session)
