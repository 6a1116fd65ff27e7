"""Provider listing router."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from transcoding_api.providers import ProviderRegistry


def api_create_providers_router(provider_registry: ProviderRegistry) -> APIRouter:
    """Create router listing registered provider names.

    Args:
        provider_registry: Provider registry.

    Returns:
        APIRouter: Router exposing `/providers` endpoint.

    Raises:
        ValueError: Raised when provider_registry is invalid.
    """

    if provider_registry is None:
        raise ValueError("provider_registry must not be None")

    router = APIRouter(tags=["providers"])

    @router.get("/providers")
    def api_provider_list() -> JSONResponse:
        payload = {"providers": list(provider_registry.registry_provider_names())}
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
