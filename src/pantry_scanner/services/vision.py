"""Vision annotation interface."""

from typing import Protocol

VISION_FEATURES: list[dict[str, object]] = [
    {"type": "LABEL_DETECTION", "maxResults": 25},
    {"type": "OBJECT_LOCALIZATION", "maxResults": 15},
    {"type": "TEXT_DETECTION", "maxResults": 50},
]


class VisionClient(Protocol):
    """Interface for image annotation providers."""

    async def annotate(self, image_content: str) -> dict[str, object]:
        """Return the raw annotate response for a base64 encoded image."""


def build_annotate_request(image_content: str) -> dict[str, object]:
    """Build the images:annotate request body for one image."""
    return {
        "requests": [
            {
                "image": {"content": image_content},
                "features": VISION_FEATURES,
            }
        ]
    }
