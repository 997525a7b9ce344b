"""
Domain Exceptions
=================

Failures surfaced by the entry store and the authentication layer.
"""
from typing import Optional


class EntryStoreError(Exception):
    """Base class for entry store failures. Wraps the underlying driver error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class WriteFailed(EntryStoreError):
    """Creating an entry failed."""


class QueryFailed(EntryStoreError):
    """Listing entries failed."""


class DeleteFailed(EntryStoreError):
    """Deleting an entry failed."""


class PermissionDenied(EntryStoreError):
    """The store policy layer rejected the operation for this principal."""


class NotAuthenticated(Exception):
    """An operation that requires a principal was attempted without one."""


class InvalidCredential(Exception):
    """An identity credential or session token could not be verified."""
