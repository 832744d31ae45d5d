"""Application service that persists shoot sessions between calls."""

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Protocol

from shoot_mode.domain.catalog import ShotCategory, get_category
from shoot_mode.domain.progress import CompletionValidation, SessionProgress
from shoot_mode.domain.sessions import ShootSession, ShotMetadata, ShotStatus
from shoot_mode.services import lifecycle, sessions
from shoot_mode.services.codec import deserialize_session, serialize_session
from shoot_mode.services.progress import (
    calculate_progress,
    get_next_recommended_category,
)
from shoot_mode.services.validation import validate_session_for_completion

_logger = logging.getLogger(__name__)


class ShootSessionRepository(Protocol):
    """Persistence interface for serialized shoot sessions."""

    def save_session(
        self, session_id: str, listing_id: str, status: str, payload: str
    ) -> None:
        """Insert or replace the stored payload for a session."""

    def get_session_payload(self, session_id: str) -> str | None:
        """Return the stored payload for a session, if present."""


class ShootSessionNotFoundError(LookupError):
    """Raised when a session is not stored or cannot be decoded."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Shoot session not found: {session_id}")
        self.session_id = session_id


class SessionIncompleteError(Exception):
    """Raised when completion is requested for a session that is not ready."""

    def __init__(self, validation: CompletionValidation) -> None:
        problems = validation.errors or validation.warnings
        super().__init__("; ".join(problems))
        self.validation = validation


class SessionClosedError(Exception):
    """Raised when a completed or cancelled session is asked to complete again."""

    def __init__(self, session_id: str, status: str) -> None:
        super().__init__(f"Shoot session {session_id} is already {status}")
        self.session_id = session_id
        self.status = status


@dataclass
class _SessionLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@dataclass
class ShootService:
    """Loads, mutates and saves sessions on behalf of capture clients.

    Each mutation is a read-modify-write against the stored copy, so calls for
    the same session id are serialized with a per-session lock.
    """

    repository: ShootSessionRepository
    _locks: dict[str, _SessionLock] = field(default_factory=dict, repr=False)
    _locks_guard: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def start_session(
        self,
        listing_id: str,
        assignment_id: str,
        photographer_id: str,
        square_footage: float | None = None,
    ) -> ShootSession:
        """Create and persist a new session."""
        session = sessions.create_session(
            listing_id, assignment_id, photographer_id, square_footage
        )
        self._save(session)
        _logger.info(
            "Shoot session started: id=%s listing=%s required=%s",
            session.id,
            listing_id,
            session.total_photos_required,
        )
        return session

    def get_session(self, session_id: str) -> ShootSession:
        """Return the stored session or raise ShootSessionNotFoundError."""
        payload = self.repository.get_session_payload(session_id)
        if payload is None:
            raise ShootSessionNotFoundError(session_id)
        session = deserialize_session(payload)
        if session is None:
            _logger.error("Stored shoot session is unreadable: id=%s", session_id)
            raise ShootSessionNotFoundError(session_id)
        return session

    def add_shot(
        self,
        session_id: str,
        category_id: str,
        local_uri: str,
        metadata: ShotMetadata | None = None,
    ) -> ShootSession:
        """Record a newly captured shot."""
        if get_category(category_id) is None:
            _logger.warning(
                "Shot added for unknown category: session=%s category=%s",
                session_id,
                category_id,
            )
        return self._mutate(
            session_id,
            lambda session: sessions.add_shot(
                session, category_id, local_uri, metadata
            ),
        )

    def remove_shot(self, session_id: str, shot_id: str) -> ShootSession:
        """Remove a shot from the session."""
        return self._mutate(
            session_id, lambda session: sessions.remove_shot(session, shot_id)
        )

    def report_upload(  # noqa: PLR0913
        self,
        session_id: str,
        shot_id: str,
        status: ShotStatus,
        *,
        upload_progress: float | None = None,
        uploaded_url: str | None = None,
        error: str | None = None,
    ) -> ShootSession:
        """Apply an upload pipeline status report to a shot."""
        return self._mutate(
            session_id,
            lambda session: sessions.update_shot_status(
                session,
                shot_id,
                status,
                upload_progress=upload_progress,
                uploaded_url=uploaded_url,
                error=error,
            ),
        )

    def update_notes(self, session_id: str, notes: str) -> ShootSession:
        """Replace the session notes."""
        return self._mutate(
            session_id, lambda session: sessions.update_notes(session, notes)
        )

    def pause(self, session_id: str) -> ShootSession:
        """Pause the session."""
        return self._mutate(session_id, lifecycle.pause_session)

    def resume(self, session_id: str) -> ShootSession:
        """Resume the session."""
        return self._mutate(session_id, lifecycle.resume_session)

    def cancel(self, session_id: str) -> ShootSession:
        """Cancel the session."""
        with self._locked(session_id):
            session = self.get_session(session_id)
            cancelled = lifecycle.cancel_session(session)
            if cancelled is session:
                return session
            self._save(cancelled)
        _logger.info("Shoot session cancelled: id=%s", session_id)
        return cancelled

    def complete(self, session_id: str, *, force: bool = False) -> ShootSession:
        """Complete the session if it passes validation.

        Errors always block completion. Warnings block unless ``force`` is set.
        Sessions that are already completed or cancelled raise
        SessionClosedError.
        """
        with self._locked(session_id):
            session = self.get_session(session_id)
            if lifecycle.is_terminal(session):
                raise SessionClosedError(session_id, session.status)
            validation = validate_session_for_completion(session)
            if not validation.is_valid or (validation.warnings and not force):
                raise SessionIncompleteError(validation)
            completed = lifecycle.complete_session(session)
            self._save(completed)
        _logger.info(
            "Shoot session completed: id=%s shots=%s",
            session_id,
            len(completed.shots),
        )
        return completed

    def progress(self, session_id: str) -> SessionProgress:
        """Return the session's progress snapshot."""
        return calculate_progress(self.get_session(session_id))

    def recommend(self, session_id: str) -> ShotCategory | None:
        """Return the next category to shoot, if any."""
        return get_next_recommended_category(self.get_session(session_id))

    def validate(self, session_id: str) -> CompletionValidation:
        """Return completion errors and warnings for the session."""
        return validate_session_for_completion(self.get_session(session_id))

    def _mutate(
        self, session_id: str, change: Callable[[ShootSession], ShootSession]
    ) -> ShootSession:
        with self._locked(session_id):
            session = self.get_session(session_id)
            updated = change(session)
            if updated is not session:
                self._save(updated)
        return updated

    def _save(self, session: ShootSession) -> None:
        self.repository.save_session(
            session_id=session.id,
            listing_id=session.listing_id,
            status=session.status,
            payload=serialize_session(session),
        )

    @contextmanager
    def _locked(self, session_id: str) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.setdefault(session_id, _SessionLock())
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[session_id]
