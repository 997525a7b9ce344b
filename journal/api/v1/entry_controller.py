"""
Entry Controller
================

FastAPI controller for journal entry endpoints.
All endpoints act on the signed-in user's own entries.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from journal.api.v1.dependencies import get_entry_service, require_auth_session
from journal.application.dto.entry_dto import (
    EntryCreateRequest,
    EntryCreateResponse,
    EntryDeleteResponse,
    EntryResponse,
)
from journal.application.services.entry_service import EntryService
from journal.domain.exceptions import EntryStoreError, NotAuthenticated, PermissionDenied
from journal.domain.models.auth import AuthSession

router = APIRouter(tags=["entries"])


def _to_http_error(e: Exception) -> HTTPException:
    """Map domain failures to HTTP errors."""
    if isinstance(e, NotAuthenticated):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    if isinstance(e, PermissionDenied):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Journal storage is unavailable, please retry",
    )


@router.post(
    "",
    response_model=EntryCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Write a new entry",
    description="""
    Save a new journal entry for the signed-in user.

    The creation timestamp is assigned by the database, not the client.
    """
)
def create_entry(
    request: EntryCreateRequest,
    session: AuthSession = Depends(require_auth_session),
    service: EntryService = Depends(get_entry_service),
) -> EntryCreateResponse:
    """Write a new entry."""
    try:
        entry_id = service.create_entry(session, request.content)
    except (EntryStoreError, NotAuthenticated, ValueError) as e:
        raise _to_http_error(e)

    return EntryCreateResponse(id=entry_id)


@router.get(
    "",
    response_model=List[EntryResponse],
    summary="List entries",
    description="Get all of the signed-in user's entries, most recent first."
)
def list_entries(
    session: AuthSession = Depends(require_auth_session),
    service: EntryService = Depends(get_entry_service),
) -> List[EntryResponse]:
    """List the caller's entries."""
    try:
        entries = service.list_entries(session)
    except (EntryStoreError, NotAuthenticated) as e:
        raise _to_http_error(e)

    return [EntryResponse.from_entity(entry) for entry in entries]


@router.delete(
    "/{entry_id}",
    response_model=EntryDeleteResponse,
    summary="Delete an entry",
    description="Delete one of the signed-in user's entries. Deleting a missing entry succeeds."
)
def delete_entry(
    entry_id: str,
    session: AuthSession = Depends(require_auth_session),
    service: EntryService = Depends(get_entry_service),
) -> EntryDeleteResponse:
    """Delete an entry."""
    try:
        service.delete_entry(session, entry_id)
    except (EntryStoreError, NotAuthenticated, ValueError) as e:
        raise _to_http_error(e)

    return EntryDeleteResponse(status="deleted", entry_id=entry_id)
