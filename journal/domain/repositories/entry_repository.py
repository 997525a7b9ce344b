"""
Entry Repository Interface
==========================

Abstract interface for journal entry data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from journal.domain.models.auth import Principal
from journal.domain.models.entry import Entry


class EntryRepository(ABC):
    """
    Abstract repository for entry persistence operations.

    Only three operations exist: entries are never updated.
    Every operation is evaluated against the principal the repository is
    bound to (see `for_principal`).
    """

    @abstractmethod
    def for_principal(self, principal: Optional[Principal]) -> "EntryRepository":
        """
        Return a view of this repository bound to the requesting principal.

        Args:
            principal: Authenticated principal, or None for anonymous access

        Returns:
            Repository whose operations are checked against `principal`
        """
        pass

    @abstractmethod
    def create(self, owner_id: str, content: str) -> str:
        """
        Create a new entry with a store-assigned creation timestamp.

        Args:
            owner_id: Identifier of the authenticated owner
            content: Entry text, already trimmed and validated by the caller

        Returns:
            Identifier of the new entry

        Raises:
            WriteFailed: If the store write fails
            PermissionDenied: If the policy rejects the write
        """
        pass

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> List[Entry]:
        """
        List all entries of an owner, most recent first.

        Args:
            owner_id: Owner identifier

        Returns:
            List of entries (empty if the owner has none)

        Raises:
            QueryFailed: If the store read fails
            PermissionDenied: If the policy rejects the query
        """
        pass

    @abstractmethod
    def delete(self, entry_id: str) -> None:
        """
        Delete an entry by id. Deleting a missing entry is a no-op.

        Ownership is not pre-filtered here; the store policy decides.

        Args:
            entry_id: Entry identifier

        Raises:
            DeleteFailed: If the store cannot perform the removal
            PermissionDenied: If the policy rejects the removal
        """
        pass
