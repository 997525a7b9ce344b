"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .entry_provider import EntryProvider
from .auth_provider import AuthProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "EntryProvider",
    "AuthProvider",
]
