"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from pantry_scanner.adapters.google_vision_client import HttpxGoogleVisionClient
from pantry_scanner.adapters.supabase_auth_provider import SupabaseAuthProvider
from pantry_scanner.adapters.supabase_pantry_repository import (
    SupabasePantryRepository,
)
from pantry_scanner.config import Settings
from pantry_scanner.services.analysis import AnalysisService
from pantry_scanner.services.pantry import AuthProvider, PantryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: AnalysisService
    pantry_service: PantryService
    auth_provider: AuthProvider
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    vision_client = HttpxGoogleVisionClient.create(
        api_key=resolved_settings.google_cloud_vision_api_key,
        base_url=resolved_settings.vision_base_url,
        timeout_seconds=resolved_settings.vision_timeout_seconds,
    )

    async def close_resources() -> None:
        await vision_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=AnalysisService(client=vision_client),
        pantry_service=PantryService(SupabasePantryRepository(supabase_client)),
        auth_provider=SupabaseAuthProvider(supabase_client),
        close_resources=close_resources,
    )
