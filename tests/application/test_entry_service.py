"""
Tests for EntryService and the entry use cases
"""
import pytest

from journal.domain.exceptions import NotAuthenticated, PermissionDenied, WriteFailed
from journal.domain.models.auth import AuthSession


class TestCreateEntry:
    def test_content_is_trimmed(self, entry_service, alice_session):
        entry_service.create_entry(alice_session, "  My journal entry \n")

        entries = entry_service.list_entries(alice_session)
        assert entries[0].content == "My journal entry"

    def test_owner_is_the_signed_in_principal(self, entry_service, alice_session):
        entry_service.create_entry(alice_session, "hello")

        assert entry_service.list_entries(alice_session)[0].owner_id == "user-abc"

    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    def test_blank_content_is_rejected(self, entry_service, alice_session, collection, content):
        with pytest.raises(ValueError):
            entry_service.create_entry(alice_session, content)

        assert collection.docs == {}

    def test_store_failure_propagates(self, entry_service, alice_session, collection):
        collection.failing.add("update_one")

        with pytest.raises(WriteFailed):
            entry_service.create_entry(alice_session, "content")


class TestSessionGate:
    @pytest.mark.parametrize("session", [AuthSession(), AuthSession.anonymous()])
    def test_operations_require_authentication(self, entry_service, session):
        with pytest.raises(NotAuthenticated):
            entry_service.create_entry(session, "text")
        with pytest.raises(NotAuthenticated):
            entry_service.list_entries(session)
        with pytest.raises(NotAuthenticated):
            entry_service.delete_entry(session, "entry-123")


class TestListAndDelete:
    def test_users_only_see_their_own_entries(self, entry_service, alice_session, bob_session):
        entry_service.create_entry(alice_session, "alice's")
        entry_service.create_entry(bob_session, "bob's")

        assert [e.content for e in entry_service.list_entries(alice_session)] == ["alice's"]
        assert [e.content for e in entry_service.list_entries(bob_session)] == ["bob's"]

    def test_new_user_has_no_entries(self, entry_service, bob_session):
        assert entry_service.list_entries(bob_session) == []

    def test_delete_own_entry(self, entry_service, alice_session):
        entry_id = entry_service.create_entry(alice_session, "bye")

        entry_service.delete_entry(alice_session, entry_id)

        assert entry_service.list_entries(alice_session) == []

    def test_cannot_delete_someone_elses_entry(self, entry_service, alice_session, bob_session):
        entry_id = entry_service.create_entry(alice_session, "private")

        with pytest.raises(PermissionDenied):
            entry_service.delete_entry(bob_session, entry_id)

        assert [e.id for e in entry_service.list_entries(alice_session)] == [entry_id]

    def test_blank_entry_id_is_rejected(self, entry_service, alice_session):
        with pytest.raises(ValueError):
            entry_service.delete_entry(alice_session, " ")
