"""AWS Elastic Transcoder provider implementation for job submission and status."""

from __future__ import annotations

import logging
import posixpath
from typing import Any, Final, Sequence

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import ClientError

from transcoding_api.config import AppSettings, ElasticTranscoderSettings
from transcoding_api.domain import JobStatus, ProviderJobStatus, domain_map_status

from .errors import ProviderInvalidConfigError, ProviderJobNotFoundError
from .interfaces import TranscodingProviderPort

logger = logging.getLogger(__name__)

ELASTIC_TRANSCODER_PROVIDER_NAME: Final[str] = "elastictranscoder"
ELASTIC_TRANSCODER_DEFAULT_REGION: Final[str] = "us-east-1"

ELASTIC_TRANSCODER_STATUS_MAP: Final[dict[str, JobStatus]] = {
    "Submitted": JobStatus.QUEUED,
    "Progressing": JobStatus.STARTED,
    "Canceled": JobStatus.CANCELED,
    "Error": JobStatus.FAILED,
    "Complete": JobStatus.FINISHED,
}


class ElasticTranscoderProvider(TranscodingProviderPort):
    """Provider adapter for Elastic Transcoder `CreateJob` and `ReadJob` calls."""

    _SERVICE_NAME: Final[str] = "elastictranscoder"
    _NOT_FOUND_ERROR_CODE: Final[str] = "ResourceNotFoundException"

    def __init__(self, config: ElasticTranscoderSettings, client: Any | None = None):
        """Initialize provider after validating its sub-config.

        Args:
            config: Elastic Transcoder sub-config.
            client: Optional pre-built service client; a boto3 client bound to
                the configured credentials and region is used when omitted.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ProviderInvalidConfigError: Raised when credentials or pipeline id are blank.
        """

        if config is None:
            raise ProviderInvalidConfigError(
                "elastic transcoder config is missing",
                provider_name=ELASTIC_TRANSCODER_PROVIDER_NAME,
            )

        missing_fields = [
            field_name
            for field_name in ("access_key_id", "secret_access_key", "pipeline_id")
            if not getattr(config, field_name).strip()
        ]
        if missing_fields:
            raise ProviderInvalidConfigError(
                f"invalid elastic transcoder config: missing {', '.join(missing_fields)}",
                provider_name=ELASTIC_TRANSCODER_PROVIDER_NAME,
            )

        self._config = config
        self._region = config.region.strip() or ELASTIC_TRANSCODER_DEFAULT_REGION
        self._session = boto3.Session(
            aws_access_key_id=config.access_key_id.strip(),
            aws_secret_access_key=config.secret_access_key.strip(),
            region_name=self._region,
        )
        self._client = client

    def provider_name(self) -> str:
        """Return stable provider label."""

        return ELASTIC_TRANSCODER_PROVIDER_NAME

    def provider_region(self) -> str:
        """Return the AWS region the provider is bound to."""

        return self._region

    def provider_submit_job(self, source: str, profile_ids: Sequence[str]) -> ProviderJobStatus:
        """Create one Elastic Transcoder job with one output per profile.

        Args:
            source: Input object key inside the pipeline input bucket.
            profile_ids: Ordered Elastic Transcoder preset identifiers.

        Returns:
            ProviderJobStatus: Backend job id and normalized initial status.

        Raises:
            ValueError: Raised when source or profile ids are blank.
            Exception: Backend failures are re-raised unmodified.
        """

        if not source.strip():
            raise ValueError("source must not be blank")
        if not profile_ids:
            raise ValueError("profile_ids must not be empty")

        job_outputs = [
            {"PresetId": profile_id, "Key": provider_build_output_key(source=source, profile_id=profile_id)}
            for profile_id in profile_ids
        ]
        logger.debug(
            "creating elastic transcoder job pipeline=%s source=%s outputs=%d",
            self._config.pipeline_id,
            source,
            len(job_outputs),
        )
        response = self._provider_client().create_job(
            PipelineId=self._config.pipeline_id,
            Input={"Key": source},
            Outputs=job_outputs,
        )
        job_payload = response["Job"]
        return ProviderJobStatus(
            provider_job_id=job_payload["Id"],
            status=self.provider_map_status(job_payload.get("Status")),
        )

    def provider_get_job_status(self, provider_job_id: str) -> ProviderJobStatus:
        """Read one job and return its normalized status.

        Args:
            provider_job_id: Elastic Transcoder job id.

        Returns:
            ProviderJobStatus: Normalized status snapshot.

        Raises:
            ProviderJobNotFoundError: Raised when the backend has no such job.
            Exception: Other backend failures are re-raised unmodified.
        """

        try:
            response = self._provider_client().read_job(Id=provider_job_id)
        except ClientError as error:
            if self._provider_error_code(error) == self._NOT_FOUND_ERROR_CODE:
                logger.info("elastic transcoder job not found provider_job_id=%s", provider_job_id)
                raise ProviderJobNotFoundError(
                    "job not found",
                    provider_name=ELASTIC_TRANSCODER_PROVIDER_NAME,
                ) from error
            raise

        job_payload = response["Job"]
        return ProviderJobStatus(
            provider_job_id=provider_job_id,
            status=self.provider_map_status(job_payload.get("Status")),
        )

    def provider_map_status(self, raw_status: str | None) -> JobStatus:
        """Map Elastic Transcoder status vocabulary to normalized status."""

        return domain_map_status(raw_status, ELASTIC_TRANSCODER_STATUS_MAP)

    def _provider_client(self) -> Any:
        """Return the service client, building it on first use.

        Returns:
            Any: Elastic Transcoder service client.

        Raises:
            botocore.exceptions.BotoCoreError: Raised when client creation fails.
        """

        if self._client is None:
            self._client = self._session.client(
                self._SERVICE_NAME,
                config=BotoConfig(
                    connect_timeout=self._config.connect_timeout_seconds,
                    read_timeout=self._config.read_timeout_seconds,
                    retries={"max_attempts": 1, "mode": "standard"},
                ),
            )
        return self._client

    def _provider_error_code(self, error: ClientError) -> str:
        return str(error.response.get("Error", {}).get("Code", ""))


def provider_build_output_key(source: str, profile_id: str) -> str:
    """Insert the profile id between source directory and file name.

    Args:
        source: Input object key, for example `dir/file.mp4`.
        profile_id: Profile identifier, for example `P`.

    Returns:
        str: Output key, for example `dir/P/file.mp4`.
    """

    return posixpath.join(posixpath.dirname(source), profile_id, posixpath.basename(source))


def elastic_transcoder_provider_factory(settings: AppSettings) -> ElasticTranscoderProvider:
    """Build Elastic Transcoder provider from its named sub-config.

    Args:
        settings: Process-wide application settings.

    Returns:
        ElasticTranscoderProvider: Validated provider instance.

    Raises:
        ProviderInvalidConfigError: Raised when the sub-config is incomplete.
    """

    return ElasticTranscoderProvider(config=settings.elastic_transcoder)
