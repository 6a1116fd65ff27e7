"""Job-layer dispatch service for provider submission and status reconciliation."""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable
from uuid import uuid4

from transcoding_api.config import AppSettings
from transcoding_api.db import JobRecord, JobRecordPersistenceError, JobRecordRepositoryPort
from transcoding_api.domain import ProviderJobStatus, TranscodeJobRequest
from transcoding_api.providers import (
    ProviderInvalidConfigError,
    ProviderJobNotFoundError,
    ProviderRegistry,
    TranscodingProviderPort,
)

from .interfaces import DispatchError, DispatchErrorKind, JobDispatchPort

logger = logging.getLogger(__name__)


def _job_generate_id() -> str:
    return uuid4().hex


class TranscodingDispatchService(JobDispatchPort):
    """Concrete dispatcher resolving providers through the registry.

    The service keeps no per-job state: every status query reads the stored
    record and asks the backend again.
    """

    def __init__(
        self,
        provider_registry: ProviderRegistry,
        job_record_repository: JobRecordRepositoryPort,
        settings: AppSettings,
        job_id_factory: Callable[[], str] | None = None,
    ):
        """Initialize dispatch service dependencies.

        Args:
            provider_registry: Registry of provider factories.
            job_record_repository: Job record store.
            settings: Process-wide settings passed to provider factories.
            job_id_factory: Optional internal job id generator.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if provider_registry is None:
            raise ValueError("provider_registry must not be None")
        if job_record_repository is None:
            raise ValueError("job_record_repository must not be None")
        if settings is None:
            raise ValueError("settings must not be None")

        self._provider_registry = provider_registry
        self._job_record_repository = job_record_repository
        self._settings = settings
        self._job_id_factory = job_id_factory or _job_generate_id

    def job_create(self, request: TranscodeJobRequest) -> str:
        """Validate request, submit it to its provider and persist the job record.

        Args:
            request: Inbound transcode request.

        Returns:
            str: Newly minted internal job identifier.

        Raises:
            DispatchError: Raised with kind `validation` for bad input, unknown provider
                or invalid provider config; `provider` for construction or submission
                failures, including a blank backend job id; `persistence` when the
                record cannot be stored.
        """

        provider_name = request.provider.strip()
        if not provider_name:
            raise DispatchError("missing provider from request", DispatchErrorKind.VALIDATION)
        if not request.source.strip():
            raise DispatchError("missing source from request", DispatchErrorKind.VALIDATION)
        if not request.profiles:
            raise DispatchError("missing profiles from request", DispatchErrorKind.VALIDATION)

        factory = self._provider_registry.registry_get_factory(provider_name)
        if factory is None:
            raise DispatchError(
                f"unknown provider found in request: {provider_name}",
                DispatchErrorKind.VALIDATION,
                provider_name=provider_name,
            )

        try:
            provider = factory(self._settings)
        except ProviderInvalidConfigError as error:
            raise DispatchError(
                f"error initializing provider {provider_name} for new job: {error}",
                DispatchErrorKind.VALIDATION,
                provider_name=provider_name,
            ) from error
        except Exception as error:
            raise DispatchError(
                f"error initializing provider {provider_name} for new job: {error}",
                DispatchErrorKind.PROVIDER,
                provider_name=provider_name,
            ) from error

        try:
            submitted_status = provider.provider_submit_job(request.source, request.profiles)
        except Exception as error:
            logger.warning("job submission failed provider=%s error=%s", provider_name, error)
            raise DispatchError(
                f"error with provider '{provider_name}': {error}",
                DispatchErrorKind.PROVIDER,
                provider_name=provider_name,
            ) from error

        if not (submitted_status.provider_job_id or "").strip():
            logger.warning("job submission returned blank backend job id provider=%s", provider_name)
            raise DispatchError(
                f"error with provider '{provider_name}': backend returned a blank job id",
                DispatchErrorKind.PROVIDER,
                provider_name=provider_name,
            )

        job_record = JobRecord(
            job_id=self._job_id_factory(),
            provider_name=provider_name,
            provider_job_id=submitted_status.provider_job_id,
        )
        try:
            self._job_record_repository.db_job_record_create(job_record)
        except JobRecordPersistenceError as error:
            raise DispatchError(
                f"error persisting job for provider '{provider_name}': {error}",
                DispatchErrorKind.PERSISTENCE,
                provider_name=provider_name,
            ) from error

        logger.info(
            "job created job_id=%s provider=%s provider_job_id=%s status=%s",
            job_record.job_id,
            provider_name,
            job_record.provider_job_id,
            submitted_status.status.value,
        )
        return job_record.job_id

    def job_get_status(self, job_id: str) -> ProviderJobStatus:
        """Resolve the stored job record and query live backend status.

        Args:
            job_id: Internal job identifier.

        Returns:
            ProviderJobStatus: Live status with provider name attached.

        Raises:
            DispatchError: Raised with kind `not_found` for unknown ids or backend-unknown
                jobs; `persistence` for record store failures; `provider` otherwise.
        """

        try:
            job_record = self._job_record_repository.db_job_record_get_by_id(job_id)
        except JobRecordPersistenceError as error:
            raise DispatchError(
                f"error retrieving job with id '{job_id}': {error}",
                DispatchErrorKind.PERSISTENCE,
            ) from error
        if job_record is None:
            raise DispatchError(
                f"error retrieving job with id '{job_id}': job not found",
                DispatchErrorKind.NOT_FOUND,
            )

        provider = self._job_build_provider_for_record(job_record)
        try:
            live_status = provider.provider_get_job_status(job_record.provider_job_id)
        except ProviderJobNotFoundError as error:
            raise DispatchError(
                f"error with provider '{job_record.provider_name}' when trying to retrieve job id '{job_id}': {error}",
                DispatchErrorKind.NOT_FOUND,
                provider_name=job_record.provider_name,
            ) from error
        except Exception as error:
            logger.warning(
                "job status lookup failed job_id=%s provider=%s error=%s",
                job_id,
                job_record.provider_name,
                error,
            )
            raise DispatchError(
                f"error with provider '{job_record.provider_name}' when trying to retrieve job id '{job_id}': {error}",
                DispatchErrorKind.PROVIDER,
                provider_name=job_record.provider_name,
            ) from error

        return dataclasses.replace(live_status, provider_name=job_record.provider_name)

    def _job_build_provider_for_record(self, job_record: JobRecord) -> TranscodingProviderPort:
        """Construct the provider owning a stored job.

        A stored job whose provider cannot be built is a server-side failure,
        regardless of the construction error type.

        Args:
            job_record: Stored job record.

        Returns:
            TranscodingProviderPort: Provider instance.

        Raises:
            DispatchError: Raised with kind `provider` on unknown provider or construction failure.
        """

        factory = self._provider_registry.registry_get_factory(job_record.provider_name)
        if factory is None:
            raise DispatchError(
                f"unknown provider '{job_record.provider_name}' for job id '{job_record.job_id}'",
                DispatchErrorKind.PROVIDER,
                provider_name=job_record.provider_name,
            )
        try:
            return factory(self._settings)
        except Exception as error:
            raise DispatchError(
                f"error initializing provider '{job_record.provider_name}' on job id '{job_record.job_id}': {error}",
                DispatchErrorKind.PROVIDER,
                provider_name=job_record.provider_name,
            ) from error
