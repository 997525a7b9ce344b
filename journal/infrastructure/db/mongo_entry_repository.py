"""
MongoDB Entry Repository
========================

Concrete implementation of EntryRepository using MongoDB.
"""
import logging
from datetime import timezone
from typing import List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from journal.core.config import get_settings
from journal.domain.constants.entry_fields import EntryFields
from journal.domain.exceptions import DeleteFailed, QueryFailed, WriteFailed
from journal.domain.models.auth import Principal
from journal.domain.models.entry import Entry
from journal.domain.policy import EntryAccessPolicy, EntryAction
from journal.domain.repositories.entry_repository import EntryRepository
from journal.infrastructure.db.mongo_connection import get_mongo_client
from journal.utils.datetime_utils import to_iso

logger = logging.getLogger(__name__)


class MongoEntryRepository(EntryRepository):
    """
    MongoDB implementation of EntryRepository.

    Every request passes through EntryAccessPolicy for the bound principal
    before it reaches the collection. The owner filter on list queries is a
    query-shape convenience; the policy is what actually guards the data.
    """

    LIST_INDEX_NAME = "owner_id_created_at_desc"

    def __init__(
        self,
        collection: Optional[Collection] = None,
        policy: Optional[EntryAccessPolicy] = None,
        principal: Optional[Principal] = None,
    ):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Entries collection (defaults to the configured one)
            policy: Access policy evaluated at the store boundary
            principal: Principal the repository is bound to
        """
        if collection is None:
            collection = get_mongo_client().get_collection(get_settings().entries_collection)
        self._collection = collection
        self._policy = policy or EntryAccessPolicy()
        self._principal = principal

    def for_principal(self, principal: Optional[Principal]) -> "MongoEntryRepository":
        return MongoEntryRepository(self._collection, self._policy, principal)

    def ensure_indexes(self) -> None:
        """Create the index backing owner-scoped, newest-first listing."""
        self._collection.create_index(
            [(EntryFields.OWNER_ID, ASCENDING), (EntryFields.CREATED_AT, DESCENDING)],
            name=self.LIST_INDEX_NAME,
        )

    def _to_entity(self, doc: dict) -> Entry:
        """Convert MongoDB document to Entry entity."""
        created_at = doc[EntryFields.CREATED_AT]
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Entry(
            id=str(doc[EntryFields.MONGO_ID]),
            owner_id=doc[EntryFields.OWNER_ID],
            content=doc[EntryFields.CONTENT],
            created_at=created_at,
        )

    def create(self, owner_id: str, content: str) -> str:
        """Create a new entry; created_at comes from the database clock."""
        record = {
            EntryFields.OWNER_ID: owner_id,
            EntryFields.CONTENT: content,
        }
        self._policy.check(self._principal, EntryAction.CREATE, record)

        entry_id = ObjectId()
        try:
            # Upsert of a fresh _id always inserts; $currentDate stamps it server-side
            self._collection.update_one(
                {EntryFields.MONGO_ID: entry_id},
                {
                    "$setOnInsert": record,
                    "$currentDate": {EntryFields.CREATED_AT: True},
                },
                upsert=True,
            )
        except PyMongoError as e:
            logger.error("Failed to create entry for owner %r: %s", owner_id, e)
            raise WriteFailed("Failed to create entry", cause=e) from e

        logger.debug("Created entry %s for owner %r", entry_id, owner_id)
        return str(entry_id)

    def list_by_owner(self, owner_id: str) -> List[Entry]:
        """List an owner's entries, newest first."""
        query = {EntryFields.OWNER_ID: owner_id}
        self._policy.check(self._principal, EntryAction.READ, query)

        try:
            docs = list(
                self._collection.find(query).sort(
                    [(EntryFields.CREATED_AT, DESCENDING), (EntryFields.MONGO_ID, DESCENDING)]
                )
            )
        except PyMongoError as e:
            logger.error("Failed to list entries for owner %r: %s", owner_id, e)
            raise QueryFailed("Failed to list entries", cause=e) from e

        return [
            self._to_entity(doc)
            for doc in docs
            if self._policy.allows(self._principal, EntryAction.READ, doc)
        ]

    def delete(self, entry_id: str) -> None:
        """Delete an entry if the bound principal is allowed to."""
        # Unbound callers are refused before the no-op paths below
        owner_id = self._principal.uid if self._principal else None
        self._policy.check(self._principal, EntryAction.DELETE, {EntryFields.OWNER_ID: owner_id})

        if not ObjectId.is_valid(entry_id):
            logger.debug("Ignoring delete of malformed entry id %r", entry_id)
            return
        object_id = ObjectId(entry_id)

        try:
            doc = self._collection.find_one({EntryFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error("Failed to load entry %s for delete: %s", entry_id, e)
            raise DeleteFailed("Failed to delete entry", cause=e) from e

        if doc is None:
            logger.debug("Entry %s already absent", entry_id)
            return

        self._policy.check(self._principal, EntryAction.DELETE, doc)

        try:
            self._collection.delete_one({EntryFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error("Failed to delete entry %s: %s", entry_id, e)
            raise DeleteFailed("Failed to delete entry", cause=e) from e

        logger.debug(
            "Deleted entry %s written %s", entry_id, to_iso(doc.get(EntryFields.CREATED_AT))
        )
