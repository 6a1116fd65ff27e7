"""FastAPI application factory for the transcoding API."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from transcoding_api.config import AppSettings
from transcoding_api.db import DatabaseHealthPort
from transcoding_api.jobs import JobDispatchPort
from transcoding_api.providers import ProviderRegistry

from .routers import api_create_health_router, api_create_jobs_router, api_create_providers_router


def create_api_application(
    settings: AppSettings,
    db_health_service: DatabaseHealthPort,
    dispatch_service: JobDispatchPort,
    provider_registry: ProviderRegistry,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        db_health_service: Database health service used by health endpoints.
        dispatch_service: Job dispatch service for create/status endpoints.
        provider_registry: Provider registry for the provider listing endpoint.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when a router dependency is invalid.
    """
    application = FastAPI(title="Video Transcoding API")

    @application.exception_handler(RequestValidationError)
    async def api_request_validation_handler(_request: Request, error: RequestValidationError) -> JSONResponse:
        payload = {
            "status": "error",
            "kind": "validation",
            "message": f"error while parsing request: {error.errors()}",
        }
        return JSONResponse(content=payload, status_code=status.HTTP_400_BAD_REQUEST)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        return {
            "service": "video-transcoding-api",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(db_health_service=db_health_service))
    application.include_router(api_create_providers_router(provider_registry=provider_registry))
    application.include_router(api_create_jobs_router(dispatch_service=dispatch_service))

    return application
