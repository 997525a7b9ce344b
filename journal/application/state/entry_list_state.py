"""
Entry List State
================

State behind the entry list view: the loaded entries, the loading flag and
the entry currently being deleted.
"""
import asyncio
import logging
from typing import List, Optional

from journal.domain.exceptions import EntryStoreError, NotAuthenticated
from journal.domain.models.auth import AuthSession
from journal.domain.models.entry import Entry
from journal.application.services.entry_service import EntryService
from journal.application.state.request_sequencer import RequestSequencer

logger = logging.getLogger(__name__)


class EntryListState:
    """
    Entry list view state.

    Store calls run in a worker thread. Refreshes are sequenced: a response is
    applied only if no newer refresh was issued meanwhile. Failed calls are
    logged and leave the rendered entries unchanged.
    """

    QUERY_KEY = "entries"

    def __init__(
        self,
        service: EntryService,
        session: AuthSession,
        sequencer: Optional[RequestSequencer] = None,
    ):
        self._service = service
        self.session = session
        self._sequencer = sequencer or RequestSequencer()
        self.entries: List[Entry] = []
        self.loading = True
        self.deleting_id: Optional[str] = None
        self.last_error: Optional[Exception] = None

    @property
    def is_empty(self) -> bool:
        return not self.loading and not self.entries

    async def refresh(self) -> bool:
        """
        Reload entries for the session's principal.

        Returns:
            True if this call's response was applied
        """
        if not self.session.is_authenticated:
            self._sequencer.invalidate(self.QUERY_KEY)
            self.entries = []
            self.loading = False
            return True

        token = self._sequencer.issue(self.QUERY_KEY)
        try:
            entries = await asyncio.to_thread(self._service.list_entries, self.session)
        except EntryStoreError as e:
            if self._sequencer.is_latest(self.QUERY_KEY, token):
                logger.error("Failed to load entries: %s", e)
                self.last_error = e
                self.loading = False
            return False

        if not self._sequencer.is_latest(self.QUERY_KEY, token):
            logger.debug("Discarding stale entry list response (token %d)", token)
            return False

        self.entries = entries
        self.last_error = None
        self.loading = False
        return True

    async def delete(self, entry_id: str) -> bool:
        """
        Delete an entry and drop it from the list once the store confirms.

        Returns:
            True if the entry was deleted
        """
        self.deleting_id = entry_id
        try:
            await asyncio.to_thread(self._service.delete_entry, self.session, entry_id)
        except (EntryStoreError, NotAuthenticated, ValueError) as e:
            logger.error("Failed to delete entry %s: %s", entry_id, e)
            self.last_error = e
            return False
        finally:
            self.deleting_id = None

        # Refreshes issued before the delete would still list the entry
        self._sequencer.issue(self.QUERY_KEY)
        self.entries = [entry for entry in self.entries if entry.id != entry_id]
        return True
