"""
Entry Service
=============

Application service that coordinates entry-related operations.
Every operation requires an authenticated AuthSession.
"""
from typing import List

from journal.domain.exceptions import NotAuthenticated
from journal.domain.models.auth import AuthSession, Principal
from journal.domain.models.entry import Entry
from journal.domain.repositories.entry_repository import EntryRepository
from journal.application.use_cases.entry.create_entry import CreateEntryUseCase
from journal.application.use_cases.entry.delete_entry import DeleteEntryUseCase
from journal.application.use_cases.entry.list_entries import ListEntriesUseCase


class EntryService:
    """
    Application service for journal entry operations.

    This service gates repository access on the caller's session and
    delegates to the individual use cases.
    """

    def __init__(self, entry_repository: EntryRepository):
        """
        Initialize service with repository.

        Args:
            entry_repository: Repository for entry persistence
        """
        self._repository = entry_repository
        self._create_use_case = CreateEntryUseCase(entry_repository)
        self._list_use_case = ListEntriesUseCase(entry_repository)
        self._delete_use_case = DeleteEntryUseCase(entry_repository)

    @staticmethod
    def _require_principal(session: AuthSession) -> Principal:
        if not session.is_authenticated:
            raise NotAuthenticated("Sign in to access journal entries")
        return session.principal

    def create_entry(self, session: AuthSession, content: str) -> str:
        """
        Write a new entry for the signed-in user.

        Args:
            session: Caller's auth session
            content: Entry text (trimmed before it is stored)

        Returns:
            Identifier of the new entry
        """
        return self._create_use_case.execute(self._require_principal(session), content)

    def list_entries(self, session: AuthSession) -> List[Entry]:
        """
        List the signed-in user's entries, most recent first.

        Args:
            session: Caller's auth session

        Returns:
            List of entries (empty when there are none)
        """
        return self._list_use_case.execute(self._require_principal(session))

    def delete_entry(self, session: AuthSession, entry_id: str) -> None:
        """
        Delete one of the signed-in user's entries.

        Args:
            session: Caller's auth session
            entry_id: Entry identifier
        """
        self._delete_use_case.execute(self._require_principal(session), entry_id)
