"""
Entry Model
===========

Domain model representing a journal entry.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Entry:
    """
    Journal entry domain model.

    Entries are create-or-delete only: there is no update path, so the
    dataclass is frozen. `id` and `created_at` are assigned by the store.
    """
    id: str
    owner_id: str
    content: str
    created_at: datetime
