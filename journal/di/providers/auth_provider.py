from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...application.services.auth_service import AuthService
from ...infrastructure.auth.identity_provider import GoogleIdentityProvider, IdentityProvider
from ...infrastructure.auth.session_tokens import SessionTokenCodec

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Auth provider - registers the identity provider adapter, token codec and auth service"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        container.register_singleton(
            IdentityProvider,
            GoogleIdentityProvider(client_id=settings.google_client_id),
        )
        container.register_singleton(
            SessionTokenCodec,
            SessionTokenCodec(
                secret_key=settings.session_secret_key,
                algorithm=settings.session_algorithm,
                expire_minutes=settings.session_expire_minutes,
            ),
        )
        container.register_singleton(
            AuthService,
            AuthService(
                identity_provider=container.get(IdentityProvider),
                token_codec=container.get(SessionTokenCodec),
            ),
        )
