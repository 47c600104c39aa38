"""Pydantic models for HTTP request and response payloads."""

from pydantic import BaseModel, Field

from pantry_scanner.domain.pantry import PantryItem, PantryRecord


class AnalyzeImageRequest(BaseModel):
    """Image analysis request with a base64 encoded JPEG."""

    image: str | None = None


class SavePantryItemsRequest(BaseModel):
    """Items confirmed by the user for saving."""

    items: list[PantryItem] = Field(default_factory=list)


class SavePantryItemsResponse(BaseModel):
    """Result of a save request."""

    saved: int


class PantryItemsResponse(BaseModel):
    """Saved pantry rows for the current user."""

    items: list[PantryRecord]


class ErrorResponse(BaseModel):
    """Error payload returned on failure."""

    error: str
    details: str | None = None
