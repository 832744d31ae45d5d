"""Supabase-backed shoot session repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from shoot_mode.services.shoots import ShootSessionRepository


@dataclass
class SupabaseShootSessionRepository(ShootSessionRepository):
    """Stores each session as a serialized payload keyed by session id."""

    client: Client
    table_name: str = "shoot_sessions"

    def save_session(
        self, session_id: str, listing_id: str, status: str, payload: str
    ) -> None:
        """Insert or replace the stored session row."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "id": session_id,
                    "listing_id": listing_id,
                    "status": status,
                    "payload": payload,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save shoot session")

    def get_session_payload(self, session_id: str) -> str | None:
        """Return the stored payload for a session, if present."""
        response = (
            self.client.table(self.table_name)
            .select("id, payload")
            .eq("id", session_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]["payload"]
