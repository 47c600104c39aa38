"""Models for Google Cloud Vision annotate responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _VisionModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="ignore")


class LabelAnnotation(_VisionModel):
    """Label detected for the whole image."""

    description: str
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    topicality: float | None = None


class LocalizedObjectAnnotation(_VisionModel):
    """Object detected within a bounding region."""

    name: str
    score: float = Field(default=0.0, ge=0.0, le=1.0)


class TextAnnotation(_VisionModel):
    """OCR text block; the first one holds the full image text."""

    description: str = ""


class AnnotationStatus(_VisionModel):
    """Per-image failure reported inside a successful batch response."""

    code: int = 0
    message: str = ""


class AnnotateImageResponse(_VisionModel):
    """Annotations for a single image."""

    error: AnnotationStatus | None = None
    label_annotations: list[LabelAnnotation] = Field(default_factory=list)
    localized_object_annotations: list[LocalizedObjectAnnotation] = Field(
        default_factory=list
    )
    text_annotations: list[TextAnnotation] = Field(default_factory=list)


class BatchAnnotateImagesResponse(_VisionModel):
    """Top-level images:annotate response."""

    responses: list[AnnotateImageResponse] = Field(default_factory=list)
