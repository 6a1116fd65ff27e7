"""Typed domain models shared across runtime layers."""

from __future__ import annotations

from dataclasses import dataclass

from .status import JobStatus


@dataclass(frozen=True)
class TranscodeJobRequest:
    """Inbound request for one transcoding job.

    Attributes:
        source: Location of the input media inside the backend storage.
        profiles: Ordered backend profile (preset) identifiers.
        provider: Registered provider name.
    """

    source: str
    profiles: tuple[str, ...]
    provider: str


@dataclass(frozen=True)
class ProviderJobStatus:
    """Normalized status snapshot of one backend job.

    Attributes:
        provider_job_id: Job identifier assigned by the backend.
        status: Normalized job status.
        provider_name: Provider name, attached by the dispatch layer only.
    """

    provider_job_id: str
    status: JobStatus
    provider_name: str | None = None


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str
