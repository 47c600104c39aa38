"""Image analysis orchestration from request payload to ranked items."""

import logging
import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from pantry_scanner.domain.errors import InputError, UpstreamError
from pantry_scanner.domain.pantry import PantryItem, no_items_placeholder
from pantry_scanner.domain.taxonomy import (
    DEFAULT_POLICY,
    DEFAULT_TAXONOMY,
    ExtractionPolicy,
    Taxonomy,
)
from pantry_scanner.services.extraction import (
    extract_from_detections,
    extract_from_text,
)
from pantry_scanner.services.fusion import (
    filter_candidates,
    rank_candidates,
    to_pantry_items,
)
from pantry_scanner.services.ingestion import ingest_annotations
from pantry_scanner.services.vision import VisionClient

_BRAND_LINE = re.compile(r"^[A-Z][a-zA-Z\s&'-]+$")
_BRAND_MIN_LENGTH = 2
_BRAND_MAX_LENGTH = 30

_logger = logging.getLogger(__name__)


class _ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StageCounts(_ResponseModel):
    """Per-stage item counts reported alongside results."""

    vision_items: int
    text_items: int
    total_unique_items: int
    final_filtered_items: int
    confidence_thresholds: dict[str, float]


class AnalysisResult(_ResponseModel):
    """Items found in an image plus debugging metadata."""

    items: list[PantryItem]
    detected_text: str = ""
    text_lines: list[str] = Field(default_factory=list)
    brand_info: list[str] = Field(default_factory=list)
    total_detections: int = 0
    analysis: StageCounts


@dataclass
class AnalysisService:
    """Service that turns a base64 image into ranked pantry items."""

    client: VisionClient
    taxonomy: Taxonomy = DEFAULT_TAXONOMY
    policy: ExtractionPolicy = DEFAULT_POLICY

    async def analyze(self, image: str | None) -> AnalysisResult:
        """Annotate the image once and rank the food items found in it."""
        if not image or not image.strip():
            raise InputError("No image data provided")

        raw = await self.client.annotate(image)
        try:
            batch = ingest_annotations(raw)
        except ValidationError as exc:
            raise UpstreamError(
                "Vision API returned an unexpected payload", details=str(exc)
            ) from exc

        vision_candidates = extract_from_detections(
            batch.detections, self.taxonomy, self.policy
        )
        text_candidates = extract_from_text(
            batch.full_text, self.taxonomy, self.policy
        )
        survivors = filter_candidates(
            vision_candidates, text_candidates, self.taxonomy, self.policy
        )
        items = to_pantry_items(rank_candidates(survivors, self.policy))
        _logger.info(
            "Analyzed image: detections=%s vision=%s text=%s final=%s",
            len(batch.detections),
            len(vision_candidates),
            len(text_candidates),
            len(items),
        )

        text_lines = [line for line in batch.full_text.split("\n") if line.strip()]
        return AnalysisResult(
            items=items or [no_items_placeholder()],
            detected_text=batch.full_text,
            text_lines=text_lines,
            brand_info=brand_lines(text_lines),
            total_detections=batch.total_annotations,
            analysis=StageCounts(
                vision_items=len(vision_candidates),
                text_items=len(text_candidates),
                total_unique_items=len(survivors),
                final_filtered_items=len(items),
                confidence_thresholds=self.policy.thresholds(),
            ),
        )


def brand_lines(text_lines: list[str]) -> list[str]:
    """Return short capitalized lines that look like brand names."""
    return [
        line
        for line in text_lines
        if _BRAND_MIN_LENGTH < len(line) < _BRAND_MAX_LENGTH
        and _BRAND_LINE.match(line.strip())
    ]
