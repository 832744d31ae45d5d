"""Progress snapshots and next-shot recommendations."""

import math

from shoot_mode.domain.catalog import (
    STANDARD_SHOT_CATEGORIES,
    ShotCategory,
    required_categories,
)
from shoot_mode.domain.progress import SessionProgress
from shoot_mode.domain.sessions import ShootSession

_CATEGORY_WEIGHT = 0.5
_VOLUME_WEIGHT = 0.5


def calculate_progress(session: ShootSession) -> SessionProgress:
    """Derive a progress snapshot from the session's shots and counters."""
    statuses = [shot.status for shot in session.shots]
    total_shots = len(statuses)
    uploading = [shot for shot in session.shots if shot.status == "uploading"]
    upload_progress = (
        sum(shot.upload_progress or 0 for shot in uploading) / len(uploading)
        if uploading
        else 0.0
    )

    required_ids = {category.id for category in required_categories()}
    required_complete = sum(
        1
        for progress in session.categories
        if progress.category_id in required_ids and progress.is_complete
    )
    total_required = len(required_ids)

    category_ratio = required_complete / total_required if total_required else 1.0
    if session.total_photos_required > 0:
        volume_ratio = min(1.0, total_shots / session.total_photos_required)
    else:
        volume_ratio = 1.0
    score = _CATEGORY_WEIGHT * category_ratio + _VOLUME_WEIGHT * volume_ratio

    return SessionProgress(
        total_shots=total_shots,
        uploaded_shots=statuses.count("uploaded"),
        failed_shots=statuses.count("failed"),
        pending_shots=statuses.count("pending") + len(uploading),
        uploading_shots=len(uploading),
        upload_progress=upload_progress,
        required_categories_complete=required_complete,
        total_required_categories=total_required,
        is_minimum_met=(
            required_complete == total_required
            and total_shots >= session.total_photos_required
        ),
        percent_complete=min(100, math.floor(score * 100 + 0.5)),
    )


def get_next_recommended_category(session: ShootSession) -> ShotCategory | None:
    """Return the category the photographer should shoot next.

    Incomplete required categories come first, then optional categories
    without any shots, each in catalog order.
    """
    progress_by_id = {progress.category_id: progress for progress in session.categories}

    for category in STANDARD_SHOT_CATEGORIES:
        if not category.required:
            continue
        progress = progress_by_id.get(category.id)
        if progress is None or not progress.is_complete:
            return category

    for category in STANDARD_SHOT_CATEGORIES:
        if category.required:
            continue
        progress = progress_by_id.get(category.id)
        if progress is None or progress.shot_count == 0:
            return category

    return None
