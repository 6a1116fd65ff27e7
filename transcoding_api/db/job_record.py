"""Database service for transcode job record persistence."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from .interfaces import JobRecord, JobRecordPersistenceError, JobRecordRepositoryPort


class SQLAlchemyJobRecordService(JobRecordRepositoryPort):
    """SQLAlchemy-backed job record service.

    Records are written once at job creation and never updated, so every
    operation is a single-row statement.
    """

    def __init__(self, engine: Engine):
        """Initialize job record persistence service.

        Args:
            engine: SQLAlchemy engine used for all persistence operations.

        Returns:
            None: This initializer does not return a value.

        Raises:
            ValueError: Raised when engine is None.
        """

        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_job_record_create(self, record: JobRecord) -> JobRecord:
        """Insert one job record.

        Args:
            record: Job record to persist.

        Returns:
            JobRecord: Persisted record.

        Raises:
            ValueError: Raised when required fields are blank.
            JobRecordPersistenceError: Raised when the insert fails, including duplicate ids.
        """

        normalized_job_id = self._validate_non_empty_text(record.job_id, "job_id")
        normalized_provider_name = self._validate_non_empty_text(record.provider_name, "provider_name")
        normalized_provider_job_id = self._validate_non_empty_text(record.provider_job_id, "provider_job_id")

        try:
            with self._engine.begin() as connection:
                connection.execute(
                    text(
                        "INSERT INTO transcode_job (job_id, provider_name, provider_job_id) "
                        "VALUES (:job_id, :provider_name, :provider_job_id)"
                    ),
                    {
                        "job_id": normalized_job_id,
                        "provider_name": normalized_provider_name,
                        "provider_job_id": normalized_provider_job_id,
                    },
                )
        except SQLAlchemyError as error:
            raise JobRecordPersistenceError("failed to create job record") from error

        return JobRecord(
            job_id=normalized_job_id,
            provider_name=normalized_provider_name,
            provider_job_id=normalized_provider_job_id,
        )

    def db_job_record_get_by_id(self, job_id: str) -> JobRecord | None:
        """Fetch one job record by internal id.

        Args:
            job_id: Internal job identifier.

        Returns:
            JobRecord | None: Matching record or None.

        Raises:
            JobRecordPersistenceError: Raised when database read fails.
        """

        try:
            with self._engine.connect() as connection:
                row = connection.execute(
                    text(
                        "SELECT job_id, provider_name, provider_job_id "
                        "FROM transcode_job "
                        "WHERE job_id = :job_id"
                    ),
                    {"job_id": job_id},
                ).mappings().first()
        except SQLAlchemyError as error:
            raise JobRecordPersistenceError("failed to fetch job record by id") from error

        if row is None:
            return None
        return self._map_job_record(row)

    def _map_job_record(self, row: Any) -> JobRecord:
        return JobRecord(
            job_id=row["job_id"],
            provider_name=row["provider_name"],
            provider_job_id=row["provider_job_id"],
        )

    def _validate_non_empty_text(self, value: str, field_name: str) -> str:
        """Validate required text input and return stripped value.

        Args:
            value: Candidate string value.
            field_name: Field name for error reporting.

        Returns:
            str: Stripped non-empty value.

        Raises:
            ValueError: Raised when value is blank.
        """

        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError(f"{field_name} must not be blank")
        return stripped_value
