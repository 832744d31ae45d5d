"""Tests for completion validation."""

import dataclasses

import pytest

from shoot_mode.domain.sessions import ShootSession
from shoot_mode.services.sessions import add_shot, update_shot_status
from shoot_mode.services.validation import validate_session_for_completion
from tests.conftest import fill_required_categories, mark_all_uploaded


def test_new_session_lists_all_missing_required_categories(
    session: ShootSession,
) -> None:
    result = validate_session_for_completion(session)

    assert result.is_valid is False
    assert result.errors == (
        "Missing required categories: Front Exterior, Back Exterior, Living Room, "
        "Kitchen, Master Bedroom, Other Bedrooms, Bathrooms",
    )
    assert result.warnings == ("Only 0 photos captured. Recommended: 25",)


def test_single_failed_shot_reports_one_failure(session: ShootSession) -> None:
    updated = add_shot(session, "kitchen", "file:///1.jpg")
    updated = update_shot_status(
        updated, updated.shots[0].id, "failed", error="Upload failed"
    )

    result = validate_session_for_completion(updated)

    failure_errors = [error for error in result.errors if "failed" in error]
    assert failure_errors == ["1 photos failed to upload"]
    assert not any("uploading" in error for error in result.errors)
    assert not any("failed" in warning for warning in result.warnings)


def test_pending_and_uploading_shots_block_completion(
    session: ShootSession,
) -> None:
    updated = fill_required_categories(session)
    updated = mark_all_uploaded(updated)
    updated = add_shot(updated, "dining", "file:///dining-1.jpg")
    updated = add_shot(updated, "dining", "file:///dining-2.jpg")
    updated = update_shot_status(
        updated, updated.shots[-1].id, "uploading", upload_progress=30
    )

    result = validate_session_for_completion(updated)

    assert result.errors == ("2 photos still uploading",)
    assert result.is_valid is False


def test_minimum_categories_below_photo_target_only_warns(
    session: ShootSession,
) -> None:
    updated = mark_all_uploaded(fill_required_categories(session))

    result = validate_session_for_completion(updated)

    assert result.errors == ()
    assert result.is_valid is True
    assert result.warnings == ("Only 13 photos captured. Recommended: 25",)


def test_fully_covered_session_is_clean(session: ShootSession) -> None:
    updated = fill_required_categories(session)
    for index in range(12):
        updated = add_shot(updated, "details", f"file:///detail-{index}.jpg")
    updated = mark_all_uploaded(updated)

    result = validate_session_for_completion(updated)

    assert result.is_valid is True
    assert result.errors == ()
    assert result.warnings == ()


def test_validation_result_cannot_be_changed(session: ShootSession) -> None:
    result = validate_session_for_completion(session)

    with pytest.raises(AttributeError):
        result.errors.append("Extra")  # type: ignore[attr-defined]
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.errors = ()  # type: ignore[misc]
    assert result.is_valid is False
    assert validate_session_for_completion(session) == result
