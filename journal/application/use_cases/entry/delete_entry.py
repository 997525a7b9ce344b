"""
Delete Entry Use Case
=====================

Business use case for removing a journal entry.
"""
import logging

from journal.domain.models.auth import Principal
from journal.domain.repositories.entry_repository import EntryRepository

logger = logging.getLogger(__name__)


class DeleteEntryUseCase:
    """
    Use case for deleting an entry on behalf of a principal.

    Ownership is decided by the store policy the repository enforces.
    """

    def __init__(self, entry_repository: EntryRepository):
        self._repository = entry_repository

    def execute(self, principal: Principal, entry_id: str) -> None:
        if not entry_id or not entry_id.strip():
            raise ValueError("Entry ID is required")

        self._repository.for_principal(principal).delete(entry_id.strip())
        logger.info("Principal %r deleted entry %s", principal.uid, entry_id)
