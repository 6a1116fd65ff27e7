"""Regression tests for the `job-status` command line entrypoint."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Sequence

import pytest
from sqlalchemy import text

from transcoding_api.config import AppSettings
from transcoding_api.db import JobRecord, db_create_engine
from transcoding_api.domain import JobStatus, ProviderJobStatus
from transcoding_api.jobs import TranscodingDispatchService
from transcoding_api.main import main, main_print_job_status
from transcoding_api.providers import ProviderRegistry


class _ProviderStub:
    """Provider double reporting every job as finished."""

    def provider_name(self) -> str:
        return "fake"

    def provider_submit_job(self, source: str, profile_ids: Sequence[str]) -> ProviderJobStatus:
        raise AssertionError(f"unexpected provider_submit_job call: {source} {profile_ids}")

    def provider_get_job_status(self, provider_job_id: str) -> ProviderJobStatus:
        return ProviderJobStatus(provider_job_id=provider_job_id, status=JobStatus.FINISHED)


class _RepositoryStub:
    """Read-only job record repository with one stored record."""

    def db_job_record_create(self, record: JobRecord) -> JobRecord:
        raise AssertionError(f"unexpected db_job_record_create call: {record}")

    def db_job_record_get_by_id(self, job_id: str) -> JobRecord | None:
        if job_id == "internal-1":
            return JobRecord(job_id="internal-1", provider_name="fake", provider_job_id="backend-job-1")
        return None


def _build_database_url(tmp_path: Path) -> str:
    """Create a SQLite record store file with the `transcode_job` table.

    Args:
        tmp_path: Pytest temporary directory fixture.

    Returns:
        str: SQLAlchemy URL of the prepared database.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: Raised when schema creation fails.
    """

    database_url = f"sqlite:///{tmp_path / 'transcoding.db'}"
    engine = db_create_engine(database_url)
    try:
        with engine.begin() as connection:
            connection.execute(
                text(
                    "CREATE TABLE transcode_job ("
                    "job_id TEXT PRIMARY KEY, "
                    "provider_name TEXT NOT NULL, "
                    "provider_job_id TEXT NOT NULL, "
                    "created_at_utc TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP"
                    ")"
                )
            )
    finally:
        engine.dispose()
    return database_url


def test_main_job_status_exits_non_zero_for_unknown_job(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Exit with code 1 when the internal job id is not stored.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate exit code and empty stdout.

    Raises:
        AssertionError: Raised when the command succeeds.
    """

    monkeypatch.setenv("DATABASE_URL", _build_database_url(tmp_path))
    monkeypatch.setattr(sys, "argv", ["video-transcoding-api", "job-status", "--job-id", "nope"])

    with pytest.raises(SystemExit) as exit_info:
        main()

    assert exit_info.value.code == 1


def test_main_job_status_requires_job_id(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", _build_database_url(tmp_path))
    monkeypatch.setattr(sys, "argv", ["video-transcoding-api", "job-status"])

    with pytest.raises(SystemExit) as exit_info:
        main()

    assert exit_info.value.code == 2


def test_main_print_job_status_prints_json_for_known_job(capsys: pytest.CaptureFixture[str]) -> None:
    """Print normalized status payload and return exit code 0.

    Args:
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate exit code and printed payload.

    Raises:
        AssertionError: Raised when output does not match.
    """

    settings = AppSettings(environment_name="test")
    dispatch_service = TranscodingDispatchService(
        provider_registry=ProviderRegistry({"fake": lambda _settings: _ProviderStub()}),
        job_record_repository=_RepositoryStub(),
        settings=settings,
    )

    exit_code = main_print_job_status(settings=settings, job_id="internal-1", dispatch_service=dispatch_service)

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == {
        "providerJobId": "backend-job-1",
        "status": "finished",
        "providerName": "fake",
    }
