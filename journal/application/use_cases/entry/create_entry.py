"""
Create Entry Use Case
=====================

Business use case for writing a new journal entry.
"""
from journal.domain.models.auth import Principal
from journal.domain.repositories.entry_repository import EntryRepository


class CreateEntryUseCase:
    """
    Use case for creating an entry owned by the requesting principal.

    The repository stores content verbatim, so trimming and the non-empty
    check happen here.
    """

    def __init__(self, entry_repository: EntryRepository):
        self._repository = entry_repository

    def execute(self, principal: Principal, content: str) -> str:
        """
        Execute the create entry use case.

        Args:
            principal: Authenticated author of the entry
            content: Raw text as typed by the user

        Returns:
            Identifier of the created entry

        Raises:
            ValueError: If the content is blank
        """
        text = (content or "").strip()
        if not text:
            raise ValueError("Entry content cannot be empty")

        return self._repository.for_principal(principal).create(principal.uid, text)
