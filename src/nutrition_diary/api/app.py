"""FastAPI application factory."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from nutrition_diary.api.models import (
    AnalyzeFoodRequest,
    AnalyzeFoodResponse,
    TargetRequest,
)
from nutrition_diary.api.users import router as users_router
from nutrition_diary.app_logging import configure_logging
from nutrition_diary.containers import AppContainer
from nutrition_diary.domain.errors import (
    DuplicateEntryError,
    ProfileNotFoundError,
    StoreUnavailableError,
    TrackerError,
    ValidationError,
)
from nutrition_diary.services.nutrition import (
    ACTIVITY_LEVELS,
    compute_target_for,
    parse_target_form,
)

_ERROR_STATUS: tuple[tuple[type[TrackerError], int], ...] = (
    (ValidationError, 422),
    (DuplicateEntryError, 409),
    (ProfileNotFoundError, 404),
    (StoreUnavailableError, 503),
)


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

    app.include_router(users_router)

    @app.exception_handler(TrackerError)
    async def tracker_error(request: Request, exc: TrackerError) -> JSONResponse:
        status_code = _status_for(exc)
        logger.warning(
            "Request failed: %s %s -> %s (%s)",
            request.method,
            request.url.path,
            status_code,
            exc,
        )
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analyze-food", response_model=AnalyzeFoodResponse)
    async def analyze_food(request: Request) -> object:
        """Estimate calories and macros for a meal description."""
        description = await _read_description(request)
        if description is None:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "Description is required"},
            )
        state_container: AppContainer = request.app.state.container
        result = await state_container.analysis_service.analyze(description)
        return AnalyzeFoodResponse(result=result)

    @app.post("/nutrition/target")
    async def nutrition_target(body: TargetRequest) -> dict[str, int]:
        """Suggest a daily calorie and macro target from body metrics."""
        target = compute_target_for(parse_target_form(body.model_dump()))
        return {
            "calories": target.calories,
            "proteins": target.proteins,
            "fats": target.fats,
            "carbs": target.carbs,
        }

    @app.get("/nutrition/activity-levels")
    async def activity_levels() -> dict[str, object]:
        """List the supported activity factors."""
        return {
            "levels": [
                {"factor": factor, "label": label}
                for factor, label in ACTIVITY_LEVELS.items()
            ]
        }

    return app


def _status_for(exc: TrackerError) -> int:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def _read_description(request: Request) -> str | None:
    """Return the posted description, or None when it is missing."""
    raw = await request.body()
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    try:
        return AnalyzeFoodRequest.model_validate(payload).text()
    except PydanticValidationError:
        return None
