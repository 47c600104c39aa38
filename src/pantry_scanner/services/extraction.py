"""Candidate extraction from vision detections and OCR text."""

from collections.abc import Iterable

from pantry_scanner.domain.models import Candidate, Detection
from pantry_scanner.domain.taxonomy import (
    DEFAULT_POLICY,
    DEFAULT_TAXONOMY,
    ExtractionPolicy,
    Taxonomy,
)
from pantry_scanner.services.categorizer import categorize


def extract_from_detections(
    detections: Iterable[Detection],
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    policy: ExtractionPolicy = DEFAULT_POLICY,
) -> list[Candidate]:
    """Return food candidates from label and object detections.

    A detection passes when it is not excluded, looks food related (keyword,
    general food term, or a score above the high-confidence bypass) and its
    score is above the vision minimum. Input order is kept.
    """
    keywords = tuple(taxonomy.keywords())
    candidates: list[Candidate] = []
    for detection in detections:
        lowered = detection.description.lower()
        if taxonomy.is_excluded(lowered):
            continue
        looks_like_food = (
            any(keyword in lowered for keyword in keywords)
            or any(term in lowered for term in taxonomy.general_food_terms)
            or detection.score > policy.vision_high_confidence
        )
        if not looks_like_food:
            continue
        if not detection.score > policy.vision_minimum:
            continue
        category = categorize(detection.description, taxonomy)
        if not category.is_food:
            continue
        candidates.append(
            Candidate(
                name=detection.description,
                confidence=detection.score,
                category=category,
                source="vision",
            )
        )
        if len(candidates) >= policy.vision_limit:
            break
    return candidates


def extract_from_text(
    full_text: str,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
    policy: ExtractionPolicy = DEFAULT_POLICY,
) -> list[Candidate]:
    """Return food candidates from words found in OCR text.

    Each word is matched against the flattened keyword list; the first
    keyword that contains the word or is contained in it decides the match.
    Text hits get a fixed confidence.
    """
    if not full_text:
        return []
    keywords = tuple(taxonomy.keywords())
    candidates: list[Candidate] = []
    seen: set[str] = set()
    for word in full_text.lower().split():
        matched = next(
            (keyword for keyword in keywords if keyword in word or word in keyword),
            None,
        )
        if matched is None:
            continue
        category = categorize(word, taxonomy)
        if not category.is_food:
            continue
        name = word[:1].upper() + word[1:]
        if name.lower() in seen:
            continue
        seen.add(name.lower())
        candidates.append(
            Candidate(
                name=name,
                confidence=policy.text_confidence,
                category=category,
                source="text",
            )
        )
        if len(candidates) >= policy.text_limit:
            break
    return candidates
