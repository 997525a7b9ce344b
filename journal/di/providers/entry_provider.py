from typing import TYPE_CHECKING
from ...domain.repositories.entry_repository import EntryRepository
from ...application.services.entry_service import EntryService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EntryProvider:
    """Entry service provider - registers entry-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            EntryService,
            EntryService(entry_repository=container.get(EntryRepository)),
        )
