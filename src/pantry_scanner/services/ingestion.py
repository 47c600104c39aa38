"""Normalization of vision API responses into detections."""

from pantry_scanner.domain.errors import UpstreamError
from pantry_scanner.domain.models import AnnotationBatch, Detection
from pantry_scanner.domain.vision import BatchAnnotateImagesResponse


def ingest_annotations(raw: dict[str, object]) -> AnnotationBatch:
    """Convert a raw images:annotate payload into an annotation batch.

    Labels come first, then localized objects; the first text annotation is
    the full OCR text. Blank descriptions are skipped, but every label and
    object still counts towards ``total_annotations``. A per-image ``error``
    is raised as ``UpstreamError``.
    """
    parsed = BatchAnnotateImagesResponse.model_validate(raw)
    if not parsed.responses:
        return AnnotationBatch(detections=[])
    response = parsed.responses[0]
    if response.error is not None:
        reason = response.error.message or f"code {response.error.code}"
        raise UpstreamError(f"Vision API error: {reason}")

    detections = [
        Detection(description=label.description, score=label.score)
        for label in response.label_annotations
        if label.description.strip()
    ]
    detections.extend(
        Detection(description=obj.name, score=obj.score, origin_kind="object")
        for obj in response.localized_object_annotations
        if obj.name.strip()
    )
    full_text = (
        response.text_annotations[0].description if response.text_annotations else ""
    )
    return AnnotationBatch(
        detections=detections,
        full_text=full_text,
        total_annotations=len(response.label_annotations)
        + len(response.localized_object_annotations),
    )
