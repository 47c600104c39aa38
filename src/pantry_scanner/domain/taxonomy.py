"""Static keyword taxonomy and extraction thresholds."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pantry_scanner.domain.models import Category

TAXONOMY_VERSION = "2024-01"

_FOOD_CATEGORIES: dict[Category, tuple[str, ...]] = {
    Category.FRUIT: (
        "apple",
        "banana",
        "orange",
        "grape",
        "berry",
        "lemon",
        "lime",
        "peach",
        "pear",
        "cherry",
        "strawberry",
        "blueberry",
        "kiwi",
        "mango",
        "pineapple",
    ),
    Category.VEGETABLES: (
        "carrot",
        "broccoli",
        "spinach",
        "lettuce",
        "tomato",
        "cucumber",
        "pepper",
        "onion",
        "garlic",
        "potato",
        "celery",
        "cabbage",
        "corn",
        "peas",
        "beans",
    ),
    Category.DAIRY: (
        "milk",
        "cheese",
        "yogurt",
        "butter",
        "cream",
        "dairy",
        "cheddar",
        "mozzarella",
    ),
    Category.MEAT: (
        "chicken",
        "beef",
        "pork",
        "fish",
        "turkey",
        "ham",
        "bacon",
        "salmon",
        "tuna",
        "meat",
    ),
    Category.BAKERY: (
        "bread",
        "bagel",
        "muffin",
        "croissant",
        "roll",
        "baguette",
        "toast",
        "loaf",
    ),
    Category.PANTRY: (
        "rice",
        "pasta",
        "cereal",
        "flour",
        "sugar",
        "salt",
        "oil",
        "vinegar",
        "sauce",
        "spice",
        "noodles",
        "grain",
    ),
    Category.BEVERAGES: (
        "juice",
        "soda",
        "water",
        "coffee",
        "tea",
        "drink",
        "beverage",
        "cola",
    ),
    Category.SNACKS: (
        "chips",
        "crackers",
        "nuts",
        "cookies",
        "candy",
        "chocolate",
        "popcorn",
        "pretzels",
    ),
    Category.FROZEN: ("ice cream", "frozen", "popsicle"),
    Category.CANNED: ("can", "jar", "bottle", "canned", "jarred"),
}

# Non-food objects the vision API commonly reports next to groceries.
_NON_FOOD_EXCLUSIONS: tuple[str, ...] = (
    # packaging
    "plastic",
    "container",
    "package",
    "packaging",
    "wrapper",
    "bag",
    "box",
    "carton",
    # furniture
    "table",
    "counter",
    "shelf",
    "surface",
    "kitchen",
    "refrigerator",
    "cabinet",
    # people
    "hand",
    "finger",
    "person",
    "human",
    "face",
    "clothing",
    "shirt",
    # text and branding
    "paper",
    "label",
    "text",
    "writing",
    "logo",
    "brand",
    "barcode",
    # devices
    "phone",
    "camera",
    "device",
    "electronic",
    "appliance",
    # structure
    "wall",
    "floor",
    "ceiling",
    "door",
    "window",
    "light",
    "shadow",
)

_GENERAL_FOOD_TERMS: tuple[str, ...] = (
    "food",
    "ingredient",
    "produce",
    "grocery",
    "edible",
    "consumable",
)


@dataclass(frozen=True)
class Taxonomy:
    """Ordered category keywords plus the non-food exclusion list.

    Category order matters: classification returns the first category with a
    matching keyword, so ``"ice cream"`` lands in Dairy via ``"cream"``.
    """

    categories: Mapping[Category, tuple[str, ...]]
    exclusions: tuple[str, ...]
    general_food_terms: tuple[str, ...] = ()
    version: str = TAXONOMY_VERSION

    @classmethod
    def build(
        cls,
        categories: Mapping[Category, tuple[str, ...]],
        exclusions: tuple[str, ...],
        general_food_terms: tuple[str, ...] = (),
        version: str = TAXONOMY_VERSION,
    ) -> "Taxonomy":
        """Create a taxonomy with a read-only copy of the category mapping."""
        return cls(
            categories=MappingProxyType(dict(categories)),
            exclusions=tuple(exclusions),
            general_food_terms=tuple(general_food_terms),
            version=version,
        )

    def keywords(self) -> Iterator[str]:
        """Yield every food keyword in category order."""
        for keywords in self.categories.values():
            yield from keywords

    def is_excluded(self, lowered: str) -> bool:
        """Return whether a lower-cased name contains a non-food keyword."""
        return any(exclusion in lowered for exclusion in self.exclusions)


@dataclass(frozen=True)
class ExtractionPolicy:
    """Confidence thresholds and result caps for the extraction pipeline.

    ``vision_minimum`` and ``vision_high_confidence`` are strict lower bounds:
    a score must be greater, not equal. ``final_minimum`` drops anything at or
    below it.
    """

    vision_minimum: float = 0.75
    vision_high_confidence: float = 0.92
    text_confidence: float = 0.85
    final_minimum: float = 0.7
    vision_limit: int = 10
    text_limit: int = 5
    result_limit: int = 8

    def thresholds(self) -> dict[str, float]:
        """Return the confidence thresholds for diagnostics output."""
        return {
            "visionMinimum": self.vision_minimum,
            "visionHighConfidence": self.vision_high_confidence,
            "textDetection": self.text_confidence,
            "finalMinimum": self.final_minimum,
        }


DEFAULT_TAXONOMY = Taxonomy.build(
    categories=_FOOD_CATEGORIES,
    exclusions=_NON_FOOD_EXCLUSIONS,
    general_food_terms=_GENERAL_FOOD_TERMS,
)

DEFAULT_POLICY = ExtractionPolicy()
