"""Shoot session creation and shot mutators.

Every function here is pure: it takes a session value and returns a new one.
Category progress is rebuilt from the shot list whenever the shot list
changes, so counts and completeness can never drift from the shots they
describe.
"""

import math
from collections import Counter
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from shoot_mode.domain.catalog import STANDARD_SHOT_CATEGORIES
from shoot_mode.domain.sessions import (
    SHOT_STATUSES,
    ShootSession,
    Shot,
    ShotCategoryProgress,
    ShotMetadata,
    ShotStatus,
)

DEFAULT_PHOTOS_REQUIRED = 25
SMALL_HOME_SQFT = 1500

# (inclusive upper bound in sqft, photos required) above the small-home tier.
_PHOTO_TIERS: tuple[tuple[int, int], ...] = (
    (2500, 25),
    (3500, 35),
    (5000, 45),
)
_SMALL_HOME_PHOTOS = 20
_LARGE_HOME_PHOTOS = 60
_MAX_UPLOAD_PROGRESS = 100


def calculate_required_photos(square_footage: float | None = None) -> int:
    """Return the number of photos required for a listing's square footage."""
    if not square_footage:
        return DEFAULT_PHOTOS_REQUIRED
    if square_footage < SMALL_HOME_SQFT:
        return _SMALL_HOME_PHOTOS
    for upper_bound, photos in _PHOTO_TIERS:
        if square_footage <= upper_bound:
            return photos
    return _LARGE_HOME_PHOTOS


def create_session(
    listing_id: str,
    assignment_id: str,
    photographer_id: str,
    square_footage: float | None = None,
) -> ShootSession:
    """Start a new in-progress session with empty category progress."""
    return ShootSession(
        id=f"shoot-{uuid4().hex}",
        listing_id=listing_id,
        assignment_id=assignment_id,
        photographer_id=photographer_id,
        started_at=datetime.now(tz=UTC),
        status="in_progress",
        total_photos_required=calculate_required_photos(square_footage),
        shots=(),
        categories=tally_categories(()),
        notes="",
    )


def tally_categories(shots: tuple[Shot, ...]) -> tuple[ShotCategoryProgress, ...]:
    """Build one progress entry per catalog category from a shot list."""
    counts = Counter(shot.category_id for shot in shots)
    return tuple(
        ShotCategoryProgress(
            category_id=category.id,
            shot_count=counts[category.id],
            is_complete=counts[category.id] >= category.min_shots,
        )
        for category in STANDARD_SHOT_CATEGORIES
    )


def add_shot(
    session: ShootSession,
    category_id: str,
    local_uri: str,
    metadata: ShotMetadata | None = None,
) -> ShootSession:
    """Append a pending shot and refresh category progress.

    EXIF data must be JSON-compatible. Tuples are stored as lists so the shot
    survives a serialize and deserialize cycle unchanged; anything JSON cannot
    carry raises ValueError.
    """
    if metadata is not None and metadata.exif_data is not None:
        metadata = replace(metadata, exif_data=_normalize_exif(metadata.exif_data))
    shot = Shot(
        id=f"shot-{uuid4().hex}",
        category_id=category_id,
        local_uri=local_uri,
        timestamp=datetime.now(tz=UTC),
        status="pending",
        metadata=metadata,
    )
    shots = (*session.shots, shot)
    return replace(session, shots=shots, categories=tally_categories(shots))


def _normalize_exif(value: Any) -> Any:
    if value is None or isinstance(value, str | bool | int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"EXIF value is not finite: {value}")
        return value
    if isinstance(value, list | tuple):
        return [_normalize_exif(item) for item in value]
    if isinstance(value, dict):
        normalized = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"EXIF key must be a string: {key!r}")
            normalized[key] = _normalize_exif(item)
        return normalized
    raise ValueError(f"EXIF value is not JSON-compatible: {type(value).__name__}")


def remove_shot(session: ShootSession, shot_id: str) -> ShootSession:
    """Remove a shot by id; unknown ids leave the session unchanged."""
    shots = tuple(shot for shot in session.shots if shot.id != shot_id)
    if len(shots) == len(session.shots):
        return session
    return replace(session, shots=shots, categories=tally_categories(shots))


def update_shot_status(
    session: ShootSession,
    shot_id: str,
    status: ShotStatus,
    *,
    upload_progress: float | None = None,
    uploaded_url: str | None = None,
    error: str | None = None,
) -> ShootSession:
    """Record an upload status report for a shot.

    Only the fields that are provided are merged into the shot. Unknown shot
    ids leave the session unchanged so replayed reports are harmless.
    """
    if status not in SHOT_STATUSES:
        raise ValueError(f"Unknown shot status: {status}")
    if upload_progress is not None and not (
        0 <= upload_progress <= _MAX_UPLOAD_PROGRESS
    ):
        raise ValueError(f"Upload progress out of range: {upload_progress}")

    updates: dict[str, object] = {"status": status}
    if upload_progress is not None:
        updates["upload_progress"] = upload_progress
    if uploaded_url is not None:
        updates["uploaded_url"] = uploaded_url
    if error is not None:
        updates["error"] = error

    found = False
    shots = []
    for shot in session.shots:
        if shot.id == shot_id:
            shot = replace(shot, **updates)  # noqa: PLW2901
            found = True
        shots.append(shot)
    if not found:
        return session
    return replace(session, shots=tuple(shots))


def update_notes(session: ShootSession, notes: str) -> ShootSession:
    """Replace the session's free-text notes."""
    return replace(session, notes=notes)


def shots_for_category(session: ShootSession, category_id: str) -> tuple[Shot, ...]:
    """Return the shots captured for a category, in capture order."""
    return tuple(shot for shot in session.shots if shot.category_id == category_id)


def get_category_progress(
    session: ShootSession, category_id: str
) -> ShotCategoryProgress | None:
    """Return the progress entry for a category, if the session tracks it."""
    for progress in session.categories:
        if progress.category_id == category_id:
            return progress
    return None
