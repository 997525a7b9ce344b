"""
Authentication Models
=====================

The principal produced by the identity provider and the explicit session
object that carries it to every call site.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """
    Authenticated identity under which an operation is performed.

    `uid` is the identity provider's subject and doubles as the entry owner id.
    The remaining attributes are for display only.
    """
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    photo_url: Optional[str] = None

    def __post_init__(self):
        if not self.uid or not self.uid.strip():
            raise ValueError("Principal uid is required")

    @property
    def initial(self) -> str:
        """First letter of the display name (or email), used as avatar fallback."""
        label = self.display_name or self.email or ""
        return label[:1].upper()


class AuthStatus(str, Enum):
    """Resolution state of an AuthSession."""
    UNRESOLVED = "unresolved"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


@dataclass
class AuthSession:
    """
    Authentication context passed explicitly to consumers.

    Starts UNRESOLVED until the identity provider reports either a principal
    (AUTHENTICATED) or no user (ANONYMOUS).
    """
    status: AuthStatus = AuthStatus.UNRESOLVED
    principal: Optional[Principal] = field(default=None)

    def __post_init__(self):
        if (self.status == AuthStatus.AUTHENTICATED) != (self.principal is not None):
            raise ValueError("A principal is present if and only if the session is authenticated")

    @classmethod
    def anonymous(cls) -> "AuthSession":
        return cls(status=AuthStatus.ANONYMOUS)

    @classmethod
    def authenticated(cls, principal: Principal) -> "AuthSession":
        return cls(status=AuthStatus.AUTHENTICATED, principal=principal)

    @property
    def loading(self) -> bool:
        return self.status == AuthStatus.UNRESOLVED

    @property
    def is_authenticated(self) -> bool:
        return self.status == AuthStatus.AUTHENTICATED

    def resolve(self, principal: Optional[Principal]) -> None:
        """Apply an identity-provider state change."""
        self.principal = principal
        self.status = AuthStatus.AUTHENTICATED if principal else AuthStatus.ANONYMOUS

    def clear(self) -> None:
        """Sign-out: drop the principal."""
        self.resolve(None)
