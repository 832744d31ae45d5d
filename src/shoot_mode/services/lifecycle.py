"""Coarse session status transitions."""

from dataclasses import replace
from datetime import UTC, datetime

from shoot_mode.domain.sessions import TERMINAL_STATUSES, ShootSession


def pause_session(session: ShootSession) -> ShootSession:
    """Pause an in-progress session; any other status is left as is."""
    if session.status != "in_progress":
        return session
    return replace(session, status="paused")


def resume_session(session: ShootSession) -> ShootSession:
    """Resume a paused session; any other status is left as is."""
    if session.status != "paused":
        return session
    return replace(session, status="in_progress")


def complete_session(session: ShootSession) -> ShootSession:
    """Mark the session completed and stamp the completion time.

    No validation happens here; callers run
    ``validate_session_for_completion`` first.
    """
    return replace(session, status="completed", completed_at=datetime.now(tz=UTC))


def cancel_session(session: ShootSession) -> ShootSession:
    """Cancel an active or paused session, stamping when it ended."""
    if is_terminal(session):
        return session
    return replace(session, status="cancelled", completed_at=datetime.now(tz=UTC))


def is_terminal(session: ShootSession) -> bool:
    """Return whether the session has been completed or cancelled."""
    return session.status in TERMINAL_STATUSES
