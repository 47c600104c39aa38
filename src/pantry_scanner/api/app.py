"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pantry_scanner.api.models import (
    AnalyzeImageRequest,
    ErrorResponse,
    PantryItemsResponse,
    SavePantryItemsRequest,
    SavePantryItemsResponse,
)
from pantry_scanner.app_logging import configure_logging
from pantry_scanner.config import parse_allowed_origins
from pantry_scanner.containers import AppContainer
from pantry_scanner.domain.errors import (
    InputError,
    PantryScannerError,
    UpstreamError,
)

_CORS_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _get_container(request: Request) -> AppContainer:
    return request.app.state.container


async def current_user_id(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(_get_container),
) -> UUID | None:
    """Resolve the bearer token to a user id, or None when signed out."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return container.auth_provider.get_user_id(token.strip())


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=_CORS_HEADERS,
    )

    @app.exception_handler(PantryScannerError)
    async def handle_app_error(
        request: Request, exc: PantryScannerError
    ) -> JSONResponse:
        if isinstance(exc, UpstreamError):
            logger.error("Error analyzing image: %s", exc.message, exc_info=exc)
            payload = ErrorResponse(
                error="Failed to analyze image",
                details=exc.details or exc.message,
            )
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
            payload = ErrorResponse(error=exc.message, details=exc.details)
        return JSONResponse(
            status_code=exc.status_code,
            content=payload.model_dump(exclude_none=True),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return await handle_app_error(
            request, InputError("Invalid request payload", details=str(exc))
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analyze-image")
    async def analyze_image(
        payload: AnalyzeImageRequest, request: Request
    ) -> dict[str, object]:
        """Detect pantry items in a base64 encoded photo."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.analysis_service.analyze(payload.image)
        return result.model_dump(by_alias=True, exclude_none=True)

    @app.post("/pantry-items")
    async def save_pantry_items(
        payload: SavePantryItemsRequest,
        request: Request,
        user_id: UUID | None = Depends(current_user_id),
    ) -> SavePantryItemsResponse:
        """Save confirmed items to the signed-in user's pantry."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.pantry_service.save_items(user_id, payload.items)
        return SavePantryItemsResponse(saved=saved)

    @app.get("/pantry-items")
    async def list_pantry_items(
        request: Request,
        user_id: UUID | None = Depends(current_user_id),
    ) -> PantryItemsResponse:
        """Return the signed-in user's pantry, newest first."""
        state_container: AppContainer = request.app.state.container
        return PantryItemsResponse(
            items=state_container.pantry_service.list_items(user_id)
        )

    return app
