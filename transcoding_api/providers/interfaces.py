"""Typed interfaces for transcoding provider responsibilities."""

from typing import Callable, Protocol, Sequence

from transcoding_api.config import AppSettings
from transcoding_api.domain import ProviderJobStatus


class TranscodingProviderPort(Protocol):
    """Port definition every transcoding backend adapter implements."""

    def provider_name(self) -> str:
        """Return provider label for diagnostics.

        Returns:
            str: Stable provider identifier.

        Raises:
            RuntimeError: Raised when provider metadata is unavailable.
        """

    def provider_submit_job(self, source: str, profile_ids: Sequence[str]) -> ProviderJobStatus:
        """Submit one transcoding job to the backend.

        Args:
            source: Input media location understood by the backend.
            profile_ids: Non-empty ordered backend profile identifiers.

        Returns:
            ProviderJobStatus: Backend job id and its initial normalized status.

        Raises:
            Exception: Backend or transport failures are re-raised unmodified.
        """

    def provider_get_job_status(self, provider_job_id: str) -> ProviderJobStatus:
        """Fetch live normalized status of one backend job.

        Args:
            provider_job_id: Job identifier assigned by the backend.

        Returns:
            ProviderJobStatus: Normalized status snapshot.

        Raises:
            ProviderJobNotFoundError: Raised when the backend has no such job.
            Exception: Other backend failures are re-raised unmodified.
        """


ProviderFactory = Callable[[AppSettings], TranscodingProviderPort]
