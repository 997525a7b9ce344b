from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for DB connections"""

    MONGO_CLIENT = "mongo_client"

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client manager in the container.
        Repositories obtain their collections through it.
        """
        container.register_singleton(DatabaseProvider.MONGO_CLIENT, get_mongo_client())
