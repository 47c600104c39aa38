"""Domain models for pantry item detection."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class Category(str, Enum):
    """Closed set of categories a detected item can fall into."""

    FRUIT = "Fruit"
    VEGETABLES = "Vegetables"
    DAIRY = "Dairy"
    MEAT = "Meat"
    BAKERY = "Bakery"
    PANTRY = "Pantry"
    BEVERAGES = "Beverages"
    SNACKS = "Snacks"
    FROZEN = "Frozen"
    CANNED = "Canned"
    OTHER = "Other"
    EXCLUDED = "Excluded"

    @property
    def is_food(self) -> bool:
        """Return whether the category may appear in a response."""
        return self not in {Category.OTHER, Category.EXCLUDED}


OriginKind = Literal["label", "object"]
CandidateSource = Literal["vision", "text"]


@dataclass(frozen=True)
class Detection:
    """Single raw annotation returned by the vision API."""

    description: str
    score: float
    origin_kind: OriginKind = "label"


@dataclass(frozen=True)
class Candidate:
    """Provisional food item produced by an extractor."""

    name: str
    confidence: float
    category: Category
    source: CandidateSource


@dataclass(frozen=True)
class AnnotationBatch:
    """Normalized vision response for one image."""

    detections: list[Detection]
    full_text: str = ""
    total_annotations: int = 0
