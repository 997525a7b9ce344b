"""
Auth DTO
========

Pydantic models for sign-in and session endpoints.
"""
from typing import Optional
from pydantic import BaseModel, Field

from journal.domain.models.auth import AuthSession, AuthStatus, Principal


class GoogleSignInRequest(BaseModel):
    """DTO carrying the ID token returned by Google Sign-In."""
    credential: str = Field(..., min_length=1, description="Google ID token")


class UserResponse(BaseModel):
    """Display attributes of the signed-in user."""
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None
    initial: str = ""

    @classmethod
    def from_principal(cls, principal: Principal) -> "UserResponse":
        return cls(
            uid=principal.uid,
            email=principal.email,
            display_name=principal.display_name,
            photo_url=principal.photo_url,
            initial=principal.initial,
        )


class SessionResponse(BaseModel):
    """Current authentication state."""
    status: AuthStatus
    user: Optional[UserResponse] = None

    @classmethod
    def from_session(cls, session: AuthSession) -> "SessionResponse":
        user = UserResponse.from_principal(session.principal) if session.principal else None
        return cls(status=session.status, user=user)


class SignInResponse(BaseModel):
    """Result of a successful sign-in."""
    token: str
    user: UserResponse
