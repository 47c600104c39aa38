"""Google Cloud Vision images:annotate client."""

import logging
from dataclasses import dataclass

import httpx

from pantry_scanner.domain.errors import ConfigurationError, UpstreamError
from pantry_scanner.services.vision import VisionClient, build_annotate_request

_logger = logging.getLogger(__name__)


@dataclass
class HttpxGoogleVisionClient(VisionClient):
    """HTTPX-backed Google Cloud Vision client."""

    api_key: str | None
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 30

    @classmethod
    def create(
        cls, api_key: str | None, base_url: str, timeout_seconds: float = 30
    ) -> "HttpxGoogleVisionClient":
        """Create a vision client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def annotate(self, image_content: str) -> dict[str, object]:
        """Request label, object and text detection for one image."""
        if not self.api_key:
            raise ConfigurationError("Google Cloud Vision API key not configured")

        url = f"{self.base_url}/images:annotate"
        try:
            response = await self.http_client.post(
                url,
                params={"key": self.api_key},
                json=build_annotate_request(image_content),
                timeout=self.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            _logger.warning("Vision API request failed: %s", exc)
            raise UpstreamError(f"Vision API error: {exc}") from exc
        if not response.is_success:
            raise UpstreamError(f"Vision API error: {response.reason_phrase}")
        try:
            return response.json()
        except ValueError as exc:
            _logger.warning("Vision API returned a non-JSON body: %s", exc)
            raise UpstreamError(f"Vision API error: {exc}") from exc

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
