"""
Tests for AuthService
"""
import pytest

from journal.domain.exceptions import InvalidCredential
from journal.domain.models.auth import AuthStatus


def test_sign_in_returns_session_and_token(auth_service, token_codec, alice):
    session, token = auth_service.sign_in("google-token-alice")

    assert session.status == AuthStatus.AUTHENTICATED
    assert session.principal == alice
    assert token_codec.decode(token) == alice


def test_sign_in_with_invalid_credential(auth_service):
    with pytest.raises(InvalidCredential):
        auth_service.sign_in("forged")


def test_resolve_without_token_is_anonymous(auth_service):
    session = auth_service.resolve(None)

    assert session.status == AuthStatus.ANONYMOUS


def test_resolve_valid_token(auth_service, token_codec, bob):
    session = auth_service.resolve(token_codec.encode(bob))

    assert session.is_authenticated
    assert session.principal == bob


def test_resolve_invalid_token_raises(auth_service):
    with pytest.raises(InvalidCredential):
        auth_service.resolve("garbage")


def test_sign_out_clears_session(auth_service, alice_session):
    session = auth_service.sign_out(alice_session)

    assert session.status == AuthStatus.ANONYMOUS
    assert session.principal is None


def test_session_max_age_follows_token_expiry(auth_service):
    assert auth_service.session_max_age_seconds == 30 * 60
