"""Fusion and ranking of extracted candidates."""

import time
from collections.abc import Sequence

from pantry_scanner.domain.models import Candidate
from pantry_scanner.domain.pantry import PantryItem
from pantry_scanner.domain.taxonomy import (
    DEFAULT_POLICY,
    DEFAULT_TAXONOMY,
    ExtractionPolicy,
    Taxonomy,
)


def merge_candidates(
    vision: Sequence[Candidate], text: Sequence[Candidate]
) -> list[Candidate]:
    """Deduplicate candidates by case-insensitive name.

    Vision candidates are considered first. A later duplicate replaces the
    kept entry only when its confidence is strictly higher.
    """
    merged: list[Candidate] = []
    positions: dict[str, int] = {}
    for candidate in [*vision, *text]:
        key = candidate.name.lower()
        index = positions.get(key)
        if index is None:
            positions[key] = len(merged)
            merged.append(candidate)
        elif candidate.confidence > merged[index].confidence:
            merged[index] = candidate
    return merged


def passes_final_guard(
    candidate: Candidate,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    policy: ExtractionPolicy = DEFAULT_POLICY,
) -> bool:
    """Return whether a merged candidate may be shown to the user."""
    if not candidate.category.is_food:
        return False
    if taxonomy.is_excluded(candidate.name.lower()):
        return False
    return candidate.confidence > policy.final_minimum


def filter_candidates(
    vision: Sequence[Candidate],
    text: Sequence[Candidate],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    policy: ExtractionPolicy = DEFAULT_POLICY,
) -> list[Candidate]:
    """Merge candidates and keep those passing the final guard."""
    return [
        candidate
        for candidate in merge_candidates(vision, text)
        if passes_final_guard(candidate, taxonomy, policy)
    ]


def rank_candidates(
    candidates: Sequence[Candidate], policy: ExtractionPolicy = DEFAULT_POLICY
) -> list[Candidate]:
    """Sort by descending confidence, keeping input order for ties, and cap."""
    ranked = sorted(
        candidates, key=lambda candidate: candidate.confidence, reverse=True
    )
    return ranked[: policy.result_limit]


def to_pantry_items(
    ranked: Sequence[Candidate], *, id_base: int | None = None
) -> list[PantryItem]:
    """Map ranked candidates to pantry items.

    Ids combine a per-call millisecond timestamp with the item rank.
    """
    base = id_base if id_base is not None else time.time_ns() // 1_000_000
    return [
        PantryItem(
            id=str(base + index),
            name=candidate.name,
            confidence=candidate.confidence,
            category=candidate.category.value,
            quantity=1,
            source=candidate.source,
        )
        for index, candidate in enumerate(ranked)
    ]


def fuse(
    vision: Sequence[Candidate],
    text: Sequence[Candidate],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    policy: ExtractionPolicy = DEFAULT_POLICY,
    *,
    id_base: int | None = None,
) -> list[PantryItem]:
    """Fuse vision and text candidates into ranked pantry items.

    An empty result is returned as-is; callers substitute the placeholder item.
    """
    survivors = filter_candidates(vision, text, taxonomy, policy)
    return to_pantry_items(rank_candidates(survivors, policy), id_base=id_base)
