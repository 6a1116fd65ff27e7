"""Typed interfaces for job-layer dispatch responsibilities."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from transcoding_api.domain import ProviderJobStatus, TranscodeJobRequest


class DispatchErrorKind(str, Enum):
    """Classification of dispatch failures for client-facing surfaces."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PROVIDER = "provider"
    PERSISTENCE = "persistence"


class DispatchError(RuntimeError):
    """Failure raised by the dispatch layer, tagged with its kind.

    The underlying exception, when any, is chained as `__cause__`.

    Attributes:
        kind: Failure classification.
        provider_name: Optional provider involved in the failure.
    """

    def __init__(self, message: str, kind: DispatchErrorKind, provider_name: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.provider_name = provider_name


class JobDispatchPort(Protocol):
    """Port definition for transcoding job creation and status lookup."""

    def job_create(self, request: TranscodeJobRequest) -> str:
        """Submit a new job to its provider and persist the job record.

        Args:
            request: Inbound transcode request.

        Returns:
            str: Internal job identifier.

        Raises:
            DispatchError: Raised on any validation, provider or persistence failure.
        """

    def job_get_status(self, job_id: str) -> ProviderJobStatus:
        """Return live normalized status for one internal job.

        Args:
            job_id: Internal job identifier.

        Returns:
            ProviderJobStatus: Status with provider name attached.

        Raises:
            DispatchError: Raised on any not-found, provider or persistence failure.
        """
