"""Domain models for shoot sessions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

ShotStatus = Literal["pending", "uploading", "uploaded", "failed"]
SessionStatus = Literal["in_progress", "paused", "completed", "cancelled"]

SHOT_STATUSES: tuple[str, ...] = ("pending", "uploading", "uploaded", "failed")
TERMINAL_STATUSES: frozenset[str] = frozenset({"completed", "cancelled"})


@dataclass(frozen=True)
class ShotMetadata:
    """Technical details reported by the capture device."""

    width: int | None = None
    height: int | None = None
    file_size: int | None = None
    mime_type: str | None = None
    # JSON-compatible values only; add_shot normalizes tuples to lists.
    exif_data: dict[str, Any] | None = None


@dataclass(frozen=True)
class Shot:
    """One captured image and its upload state."""

    id: str
    category_id: str
    timestamp: datetime
    status: ShotStatus
    local_uri: str | None = None
    uploaded_url: str | None = None
    upload_progress: float | None = None
    error: str | None = None
    metadata: ShotMetadata | None = None


@dataclass(frozen=True)
class ShotCategoryProgress:
    """Running shot count for a single catalog category."""

    category_id: str
    shot_count: int
    is_complete: bool


@dataclass(frozen=True)
class ShootSession:
    """A photographer's capture pass over one listing."""

    id: str
    listing_id: str
    assignment_id: str
    photographer_id: str
    started_at: datetime
    status: SessionStatus
    total_photos_required: int
    shots: tuple[Shot, ...] = ()
    categories: tuple[ShotCategoryProgress, ...] = ()
    notes: str = ""
    completed_at: datetime | None = None
