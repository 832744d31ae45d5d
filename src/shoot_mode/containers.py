"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from shoot_mode.adapters.supabase_shoot_session_repository import (
    SupabaseShootSessionRepository,
)
from shoot_mode.config import Settings
from shoot_mode.services.shoots import ShootService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    shoot_service: ShootService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    repository = SupabaseShootSessionRepository(
        supabase_client, table_name=resolved_settings.shoot_sessions_table
    )
    return AppContainer(
        settings=resolved_settings,
        shoot_service=ShootService(repository),
    )
