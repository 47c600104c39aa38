"""Models for items returned to clients and saved to a pantry."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NO_ITEMS_DETECTED = "No food items detected"


class PantryItem(BaseModel):
    """Detected item shown on the confirmation screen."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    confidence: float = Field(ge=0.0, le=1.0)
    category: str | None = None
    quantity: int | None = None
    source: str | None = None
    expiry_date: str | None = None


def no_items_placeholder() -> PantryItem:
    """Return the placeholder shown when nothing food-like was found."""
    return PantryItem(
        id="no-items-detected",
        name=NO_ITEMS_DETECTED,
        confidence=0,
        category="Info",
        quantity=0,
    )


class PantryRecord(BaseModel):
    """Pantry row stored for a user."""

    id: UUID | None = None
    user_id: UUID
    name: str
    quantity: int = 1
    category: str = "Other"
    confidence_score: float | None = None
    expiry_date: str | None = None
    created_at: datetime | None = None
