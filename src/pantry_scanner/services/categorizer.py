"""Keyword-based food categorization."""

from pantry_scanner.domain.models import Category
from pantry_scanner.domain.taxonomy import DEFAULT_TAXONOMY, Taxonomy


def categorize(name: str, taxonomy: Taxonomy = DEFAULT_TAXONOMY) -> Category:
    """Map an item name to a category, ``Other`` or ``Excluded``.

    Exclusions win over keyword matches, so "plastic banana container" is
    ``Excluded`` rather than ``Fruit``.
    """
    lowered = name.lower()
    if taxonomy.is_excluded(lowered):
        return Category.EXCLUDED
    for category, keywords in taxonomy.categories.items():
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.OTHER
