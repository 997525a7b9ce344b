"""
Entry DTO
=========

Pydantic models for entry API requests and responses.
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from journal.domain.models.entry import Entry
from journal.utils.datetime_utils import to_app_timezone


class EntryCreateRequest(BaseModel):
    """DTO for writing a new entry."""
    content: str = Field(..., min_length=1, description="Entry text; surrounding whitespace is trimmed")

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "My journal entry"}}
    )

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Entry content cannot be empty")
        return value


class EntryCreateResponse(BaseModel):
    """DTO returned after an entry is written."""
    id: str


class EntryResponse(BaseModel):
    """DTO for entry data."""
    id: str
    owner_id: str
    content: str
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "65a4f0c2e13b4a6f9c1d2e3f",
                "owner_id": "user-abc",
                "content": "My journal entry",
                "created_at": "2024-01-15T10:00:00Z",
            }
        }
    )

    @classmethod
    def from_entity(cls, entry: Entry) -> "EntryResponse":
        return cls(
            id=entry.id,
            owner_id=entry.owner_id,
            content=entry.content,
            created_at=to_app_timezone(entry.created_at),
        )


class EntryDeleteResponse(BaseModel):
    """DTO for entry deletion."""
    status: str
    entry_id: str
