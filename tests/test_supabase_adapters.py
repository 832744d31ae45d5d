"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

from shoot_mode.adapters.supabase_shoot_session_repository import (
    SupabaseShootSessionRepository,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": []}
    )
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_shoot_session_repository_save() -> None:
    client = FakeSupabaseClient()
    table = client.table("shoot_sessions")
    table.queue("upsert", [{"id": "shoot-1"}])

    repository = SupabaseShootSessionRepository(client)
    repository.save_session("shoot-1", "listing-1", "paused", '{"id": "shoot-1"}')

    assert isinstance(table.last_payload, dict)
    assert table.last_payload["id"] == "shoot-1"
    assert table.last_payload["listing_id"] == "listing-1"
    assert table.last_payload["status"] == "paused"
    assert table.last_payload["payload"] == '{"id": "shoot-1"}'
    assert table.last_on_conflict == "id"


def test_supabase_shoot_session_repository_save_failure() -> None:
    client = FakeSupabaseClient()

    repository = SupabaseShootSessionRepository(client)

    with pytest.raises(RuntimeError):
        repository.save_session("shoot-1", "listing-1", "paused", "{}")


def test_supabase_shoot_session_repository_get() -> None:
    client = FakeSupabaseClient()
    table = client.table("custom_sessions")
    table.queue("select", [{"id": "shoot-1", "payload": '{"id": "shoot-1"}'}])

    repository = SupabaseShootSessionRepository(client, table_name="custom_sessions")
    payload = repository.get_session_payload("shoot-1")
    missing = repository.get_session_payload("shoot-2")

    assert payload == '{"id": "shoot-1"}'
    assert missing is None
    assert ("id", "shoot-1") in table.last_filters
