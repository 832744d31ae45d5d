"""JSON codec for persisting shoot sessions."""

import logging

from pydantic import TypeAdapter, ValidationError

from shoot_mode.domain.sessions import ShootSession

_logger = logging.getLogger(__name__)

_SESSION_ADAPTER = TypeAdapter(ShootSession)


def serialize_session(session: ShootSession) -> str:
    """Encode a session as JSON with ISO-8601 timestamps."""
    return _SESSION_ADAPTER.dump_json(session).decode("utf-8")


def deserialize_session(raw: str | bytes) -> ShootSession | None:
    """Decode a session, returning None if the payload is not a valid session."""
    try:
        session = _SESSION_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        _logger.warning("Discarding malformed shoot session payload: %s", exc)
        return None
    if not _timestamps_are_aware(session):
        _logger.warning("Discarding shoot session %s with naive timestamps", session.id)
        return None
    return session


def _timestamps_are_aware(session: ShootSession) -> bool:
    stamps = [session.started_at, *(shot.timestamp for shot in session.shots)]
    if session.completed_at is not None:
        stamps.append(session.completed_at)
    return all(stamp.utcoffset() is not None for stamp in stamps)


def session_to_dict(session: ShootSession) -> dict[str, object]:
    """Return a JSON-compatible dict for a session."""
    return _SESSION_ADAPTER.dump_python(session, mode="json")
