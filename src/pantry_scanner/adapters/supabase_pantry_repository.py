"""Supabase-backed pantry repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from pantry_scanner.domain.pantry import PantryRecord
from pantry_scanner.services.pantry import PantryRepository


@dataclass
class SupabasePantryRepository(PantryRepository):
    """Supabase implementation for pantry persistence."""

    client: Client

    def insert_items(self, records: list[PantryRecord]) -> None:
        """Insert pantry rows in a single request."""
        payload = [
            {
                "user_id": str(record.user_id),
                "name": record.name,
                "quantity": record.quantity,
                "category": record.category,
                "confidence_score": record.confidence_score,
                "expiry_date": record.expiry_date,
            }
            for record in records
        ]
        response = self.client.table("pantry_items").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to insert pantry items")

    def list_items(self, user_id: UUID) -> list[PantryRecord]:
        """Return a user's pantry rows, newest first."""
        response = (
            self.client.table("pantry_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [PantryRecord.model_validate(row) for row in response.data or []]
