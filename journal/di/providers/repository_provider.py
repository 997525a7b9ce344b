from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.policy import EntryAccessPolicy
from ...domain.repositories.entry_repository import EntryRepository
from ...infrastructure.db.mongo_entry_repository import MongoEntryRepository
from .database_provider import DatabaseProvider

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the entry repository.
        Gets the database client from the database provider.
        """
        mongo_client = container.get(DatabaseProvider.MONGO_CLIENT)
        collection = mongo_client.get_collection(get_settings().entries_collection)

        container.register_singleton(EntryAccessPolicy, EntryAccessPolicy())
        container.register_singleton(
            EntryRepository,
            MongoEntryRepository(collection=collection, policy=container.get(EntryAccessPolicy)),
        )
