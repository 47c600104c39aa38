"""Pantry persistence for confirmed items."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from pantry_scanner.domain.errors import AuthenticationError, InputError
from pantry_scanner.domain.pantry import NO_ITEMS_DETECTED, PantryItem, PantryRecord

_logger = logging.getLogger(__name__)


class PantryRepository(Protocol):
    """Persistence interface for pantry rows."""

    def insert_items(self, records: list[PantryRecord]) -> None:
        """Insert all rows in one batch."""

    def list_items(self, user_id: UUID) -> list[PantryRecord]:
        """Return a user's rows, newest first."""


class AuthProvider(Protocol):
    """Resolves an access token to the signed-in user."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a token, or None when not signed in."""


def is_savable(item: PantryItem) -> bool:
    """Return whether an item may be stored in a pantry."""
    name = item.name.strip()
    return bool(name) and item.name != NO_ITEMS_DETECTED


@dataclass
class PantryService:
    """Application service for saving and listing pantry items."""

    repository: PantryRepository

    def save_items(self, user_id: UUID | None, items: list[PantryItem]) -> int:
        """Store the valid items for a user and return how many were saved."""
        if user_id is None:
            raise AuthenticationError("You must be signed in to save pantry items")

        valid_items = [item for item in items if is_savable(item)]
        if not valid_items:
            raise InputError("No valid items to save")

        records = [
            PantryRecord(
                user_id=user_id,
                name=item.name.strip(),
                quantity=item.quantity or 1,
                category=item.category or "Other",
                confidence_score=item.confidence,
                expiry_date=item.expiry_date,
            )
            for item in valid_items
        ]
        self.repository.insert_items(records)
        _logger.info("Saved pantry items: user_id=%s count=%s", user_id, len(records))
        return len(records)

    def list_items(self, user_id: UUID | None) -> list[PantryRecord]:
        """Return the saved items for a user."""
        if user_id is None:
            raise AuthenticationError("You must be signed in to view pantry items")
        return self.repository.list_items(user_id)
