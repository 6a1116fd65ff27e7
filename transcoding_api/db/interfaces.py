"""Typed interfaces for database-layer services.

All SQL access must remain in the db package and its submodules.
"""

from dataclasses import dataclass
from typing import Protocol

from transcoding_api.domain import HealthStatus


class DatabaseHealthPort(Protocol):
    """Port definition for database connectivity verification."""

    def db_connection_label(self) -> str:
        """Return a stable label for the active database connection target.

        Returns:
            str: Database target label for diagnostics.

        Raises:
            RuntimeError: Raised when connection metadata is unavailable.
        """

    def db_check_health(self) -> HealthStatus:
        """Check database connectivity and return deterministic health payload.

        Returns:
            HealthStatus: Database health status payload.

        Raises:
            ConnectionError: Raised when database cannot be reached.
        """


class JobRecordPersistenceError(RuntimeError):
    """Raised when the job record store fails on read or write."""


@dataclass(frozen=True)
class JobRecord:
    """Persistence model linking an internal job id to a backend job.

    Attributes:
        job_id: Internal job identifier minted by this service.
        provider_name: Registered provider that owns the backend job.
        provider_job_id: Job identifier assigned by the backend.
    """

    job_id: str
    provider_name: str
    provider_job_id: str


class JobRecordRepositoryPort(Protocol):
    """Port definition for job record persistence."""

    def db_job_record_create(self, record: JobRecord) -> JobRecord:
        """Persist one new job record.

        Args:
            record: Immutable job record.

        Returns:
            JobRecord: Persisted record.

        Raises:
            JobRecordPersistenceError: Raised when the write fails.
        """

    def db_job_record_get_by_id(self, job_id: str) -> JobRecord | None:
        """Fetch one job record by internal id.

        Args:
            job_id: Internal job identifier.

        Returns:
            JobRecord | None: Matching record or None when absent.

        Raises:
            JobRecordPersistenceError: Raised when the read fails.
        """
