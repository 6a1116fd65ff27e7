"""Normalized transcoding job status model shared by every provider."""

from __future__ import annotations

from enum import Enum
from typing import Mapping


class JobStatus(str, Enum):
    """Normalized job states reported regardless of backend vocabulary."""

    QUEUED = "queued"
    STARTED = "started"
    FINISHED = "finished"
    FAILED = "failed"
    CANCELED = "canceled"


def domain_map_status(raw_status: str | None, status_table: Mapping[str, JobStatus]) -> JobStatus:
    """Map one raw backend status value to the normalized enumeration.

    Unrecognized values map to `JobStatus.FAILED` so unknown backend states are
    never reported as success.

    Args:
        raw_status: Status value as emitted by the backend.
        status_table: Backend vocabulary mapping.

    Returns:
        JobStatus: Normalized status.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if raw_status is None:
        return JobStatus.FAILED
    return status_table.get(raw_status, JobStatus.FAILED)
