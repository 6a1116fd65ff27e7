"""Transcode job API router composition for job creation and status endpoints."""

from __future__ import annotations

from typing import Any, Final

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, model_validator

from transcoding_api.domain import ProviderJobStatus, TranscodeJobRequest
from transcoding_api.jobs import DispatchError, DispatchErrorKind, JobDispatchPort

API_DISPATCH_ERROR_STATUS_CODES: Final[dict[DispatchErrorKind, int]] = {
    DispatchErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    DispatchErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    DispatchErrorKind.PROVIDER: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DispatchErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class TranscodeJobPayload(BaseModel):
    """Request body for `POST /jobs`.

    Missing fields default to empty values so the dispatch layer reports them
    with field-specific messages. Field names match case-insensitively, an
    exact-case key taking precedence over other spellings.
    """

    source: str = ""
    profiles: list[str] = Field(default_factory=list)
    provider: str = ""

    @model_validator(mode="before")
    @classmethod
    def _fold_field_name_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        folded_data = {key: value for key, value in data.items() if key in cls.model_fields}
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in cls.model_fields:
                folded_data.setdefault(key.lower(), value)
        return folded_data


def api_create_jobs_router(dispatch_service: JobDispatchPort) -> APIRouter:
    """Create jobs router with create and status endpoints.

    Args:
        dispatch_service: Job-layer dispatch service.

    Returns:
        APIRouter: Router exposing `/jobs` APIs.

    Raises:
        ValueError: Raised when dispatch_service is invalid.
    """

    if dispatch_service is None:
        raise ValueError("dispatch_service must not be None")

    router = APIRouter(prefix="/jobs", tags=["jobs"])

    @router.post("")
    def api_job_create(payload: TranscodeJobPayload) -> JSONResponse:
        """Submit one transcode job and return its internal id.

        Args:
            payload: Decoded request body.

        Returns:
            JSONResponse: `{"jobId": ...}` or classified error payload.
        """

        job_request = TranscodeJobRequest(
            source=payload.source,
            profiles=tuple(payload.profiles),
            provider=payload.provider,
        )
        try:
            job_id = dispatch_service.job_create(job_request)
        except DispatchError as error:
            return api_build_dispatch_error_response(error)
        return JSONResponse(content={"jobId": job_id}, status_code=status.HTTP_200_OK)

    @router.get("/{job_id}")
    def api_job_status(job_id: str) -> JSONResponse:
        """Return live normalized status for one internal job.

        Args:
            job_id: Internal job identifier.

        Returns:
            JSONResponse: Job status payload or classified error payload.
        """

        try:
            job_status = dispatch_service.job_get_status(job_id)
        except DispatchError as error:
            return api_build_dispatch_error_response(error)
        return JSONResponse(content=api_serialize_job_status(job_status), status_code=status.HTTP_200_OK)

    return router


def api_build_dispatch_error_response(error: DispatchError) -> JSONResponse:
    """Map a tagged dispatch failure to its HTTP error response."""

    payload = {
        "status": "error",
        "kind": error.kind.value,
        "message": str(error),
    }
    return JSONResponse(content=payload, status_code=API_DISPATCH_ERROR_STATUS_CODES[error.kind])


def api_serialize_job_status(job_status: ProviderJobStatus) -> dict[str, object]:
    """Serialize normalized job status to JSON response payload.

    Args:
        job_status: Status snapshot with provider name attached.

    Returns:
        dict[str, object]: JSON-serializable status payload.
    """

    return {
        "providerJobId": job_status.provider_job_id,
        "status": job_status.status.value,
        "providerName": job_status.provider_name,
    }
