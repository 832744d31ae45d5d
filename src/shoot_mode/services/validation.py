"""Pre-submission checks for shoot sessions."""

from shoot_mode.domain.catalog import required_categories
from shoot_mode.domain.progress import CompletionValidation
from shoot_mode.domain.sessions import ShootSession
from shoot_mode.services.progress import calculate_progress


def validate_session_for_completion(session: ShootSession) -> CompletionValidation:
    """Classify problems that block completion and ones that are advisory."""
    errors: list[str] = []
    warnings: list[str] = []
    progress = calculate_progress(session)

    if progress.required_categories_complete < progress.total_required_categories:
        complete_ids = {
            entry.category_id for entry in session.categories if entry.is_complete
        }
        missing = [
            category.name
            for category in required_categories()
            if category.id not in complete_ids
        ]
        errors.append(f"Missing required categories: {', '.join(missing)}")

    if progress.total_shots < session.total_photos_required:
        warnings.append(
            f"Only {progress.total_shots} photos captured. "
            f"Recommended: {session.total_photos_required}"
        )

    if progress.failed_shots > 0:
        errors.append(f"{progress.failed_shots} photos failed to upload")

    if progress.pending_shots > 0:
        errors.append(f"{progress.pending_shots} photos still uploading")

    return CompletionValidation(errors=tuple(errors), warnings=tuple(warnings))
