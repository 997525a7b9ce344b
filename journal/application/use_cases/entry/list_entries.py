"""
List Entries Use Case
=====================

Business use case for reading the principal's own entries.
"""
from typing import List

from journal.domain.models.auth import Principal
from journal.domain.models.entry import Entry
from journal.domain.repositories.entry_repository import EntryRepository


class ListEntriesUseCase:
    """Use case for listing the requesting principal's entries, newest first."""

    def __init__(self, entry_repository: EntryRepository):
        self._repository = entry_repository

    def execute(self, principal: Principal) -> List[Entry]:
        return self._repository.for_principal(principal).list_by_owner(principal.uid)
