"""Derived progress and validation results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionProgress:
    """Point-in-time snapshot of a session's capture and upload state."""

    total_shots: int
    uploaded_shots: int
    failed_shots: int
    pending_shots: int
    uploading_shots: int
    upload_progress: float
    required_categories_complete: int
    total_required_categories: int
    is_minimum_met: bool
    percent_complete: int


@dataclass(frozen=True)
class CompletionValidation:
    """Blocking errors and advisory warnings for session completion."""

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Return whether nothing blocks completion."""
        return not self.errors
