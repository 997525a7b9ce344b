"""
Entry Composer State
====================

State behind the entry composer: the draft text and the submitting flag.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from journal.domain.exceptions import EntryStoreError
from journal.domain.models.auth import AuthSession
from journal.application.services.entry_service import EntryService

logger = logging.getLogger(__name__)


class EntryComposerState:
    """
    Composer view state.

    On success the draft is cleared and the `on_created` coroutine is awaited
    (typically to refresh an EntryListState). On failure the draft is kept
    for resubmission.
    """

    def __init__(
        self,
        service: EntryService,
        session: AuthSession,
        on_created: Optional[Callable[[str], Awaitable[object]]] = None,
    ):
        self._service = service
        self.session = session
        self._on_created = on_created
        self.draft = ""
        self.submitting = False
        self.last_error: Optional[Exception] = None

    @property
    def can_submit(self) -> bool:
        return self.session.is_authenticated and bool(self.draft.strip()) and not self.submitting

    async def submit(self) -> Optional[str]:
        """
        Save the draft as a new entry.

        Returns:
            The new entry id, or None if nothing was saved
        """
        if not self.can_submit:
            return None

        self.submitting = True
        try:
            entry_id = await asyncio.to_thread(
                self._service.create_entry, self.session, self.draft.strip()
            )
        except EntryStoreError as e:
            logger.error("Failed to create entry: %s", e)
            self.last_error = e
            return None
        finally:
            self.submitting = False

        self.draft = ""
        self.last_error = None
        if self._on_created:
            await self._on_created(entry_id)
        return entry_id
