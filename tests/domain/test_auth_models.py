"""
Tests for Principal and AuthSession
"""
import pytest

from journal.domain.models.auth import AuthSession, AuthStatus, Principal


class TestPrincipal:
    def test_uid_is_required(self):
        with pytest.raises(ValueError):
            Principal(uid="  ")

    def test_initial_prefers_display_name(self):
        assert Principal(uid="u1", display_name="test user", email="x@example.com").initial == "T"

    def test_initial_falls_back_to_email(self):
        assert Principal(uid="u1", email="zed@example.com").initial == "Z"

    def test_initial_empty_without_labels(self):
        assert Principal(uid="u1").initial == ""


class TestAuthSession:
    def test_new_session_is_unresolved_and_loading(self):
        session = AuthSession()

        assert session.status == AuthStatus.UNRESOLVED
        assert session.loading
        assert not session.is_authenticated

    def test_resolve_with_principal_authenticates(self, alice):
        session = AuthSession()
        session.resolve(alice)

        assert session.status == AuthStatus.AUTHENTICATED
        assert session.principal == alice
        assert not session.loading

    def test_resolve_without_principal_is_anonymous(self):
        session = AuthSession()
        session.resolve(None)

        assert session.status == AuthStatus.ANONYMOUS
        assert session.principal is None
        assert not session.loading

    def test_clear_signs_out(self, alice_session):
        alice_session.clear()

        assert alice_session.status == AuthStatus.ANONYMOUS
        assert alice_session.principal is None

    def test_authenticated_requires_principal(self):
        with pytest.raises(ValueError):
            AuthSession(status=AuthStatus.AUTHENTICATED)

    def test_anonymous_rejects_principal(self, alice):
        with pytest.raises(ValueError):
            AuthSession(status=AuthStatus.ANONYMOUS, principal=alice)
