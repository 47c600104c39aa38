"""Supabase Auth lookup for bearer tokens."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from pantry_scanner.services.pantry import AuthProvider

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthProvider(AuthProvider):
    """Resolve access tokens through Supabase Auth."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the signed-in user's id, or None for an invalid token."""
        try:
            response = self.client.auth.get_user(access_token)
        except Exception:  # noqa: BLE001
            _logger.warning("Supabase rejected access token")
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
