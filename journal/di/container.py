# Local application imports
from typing import Optional

from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    EntryProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (EntryProvider, AuthProvider) - depend on repositories and settings
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        EntryProvider.register(self)
        AuthProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Forget the global container (used on shutdown and in tests)."""
    global _container
    _container = None
