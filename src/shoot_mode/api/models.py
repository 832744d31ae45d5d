"""Pydantic request models for the shoot session API."""

from typing import Literal

from pydantic import BaseModel, Field, JsonValue


class StartSessionRequest(BaseModel):
    """Payload for starting a capture session."""

    listing_id: str
    assignment_id: str
    photographer_id: str
    square_footage: float | None = Field(default=None, ge=0)


class ShotMetadataPayload(BaseModel):
    """Technical details captured with a shot."""

    width: int | None = Field(default=None, ge=0)
    height: int | None = Field(default=None, ge=0)
    file_size: int | None = Field(default=None, ge=0)
    mime_type: str | None = None
    exif_data: dict[str, JsonValue] | None = None


class AddShotRequest(BaseModel):
    """Payload for recording a captured shot."""

    category_id: str
    local_uri: str
    metadata: ShotMetadataPayload | None = None


class ShotStatusRequest(BaseModel):
    """Upload status report from the upload pipeline."""

    status: Literal["pending", "uploading", "uploaded", "failed"]
    upload_progress: float | None = Field(default=None, ge=0, le=100)
    uploaded_url: str | None = None
    error: str | None = None


class NotesRequest(BaseModel):
    """Replacement notes for a session."""

    notes: str


class CompleteRequest(BaseModel):
    """Completion options."""

    force: bool = False
