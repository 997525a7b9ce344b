"""
Entry Access Policy
===================

Authoritative access rules for the entries collection, evaluated at the
store boundary for every request:

- anonymous callers may do nothing
- an entry may be created only with the caller as owner
- an entry may be read or deleted only by its owner
- entries are never updated
"""
import logging
from enum import Enum
from typing import Any, Mapping, Optional

from journal.domain.constants.entry_fields import EntryFields
from journal.domain.exceptions import PermissionDenied
from journal.domain.models.auth import Principal

logger = logging.getLogger(__name__)


class EntryAction(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class EntryAccessPolicy:
    """Predicate over (principal, action, record) -> allow/deny."""

    def allows(
        self,
        principal: Optional[Principal],
        action: EntryAction,
        record: Mapping[str, Any],
    ) -> bool:
        """
        Evaluate the rules for one operation.

        Args:
            principal: Requesting principal, None when anonymous
            action: Operation being attempted
            record: The incoming record (create), the stored record
                (read/delete), or the query constraints (list)

        Returns:
            True if the operation is allowed
        """
        if principal is None:
            return False
        if action == EntryAction.UPDATE:
            return False
        return record.get(EntryFields.OWNER_ID) == principal.uid

    def check(
        self,
        principal: Optional[Principal],
        action: EntryAction,
        record: Mapping[str, Any],
    ) -> None:
        """Raise PermissionDenied unless `allows` grants the operation."""
        if not self.allows(principal, action, record):
            uid = principal.uid if principal else None
            logger.warning("Denied %s on entry for principal %r", action.value, uid)
            raise PermissionDenied(f"Principal is not allowed to {action.value} this entry")
