"""Tests for normalized job status model and fail-safe mapping."""

from transcoding_api.domain import JobStatus, domain_map_status


def test_domain_job_status_values_are_closed_set() -> None:
    assert [status.value for status in JobStatus] == ["queued", "started", "finished", "failed", "canceled"]


def test_domain_map_status_uses_table_and_defaults_to_failed() -> None:
    """Map known values through the table and unknown values to failed.

    Returns:
        None: Assertions validate mapping behavior.

    Raises:
        AssertionError: Raised when unknown values are not treated as failed.
    """

    status_table = {"DONE": JobStatus.FINISHED, "RUNNING": JobStatus.STARTED}

    assert domain_map_status("DONE", status_table) is JobStatus.FINISHED
    assert domain_map_status("RUNNING", status_table) is JobStatus.STARTED
    assert domain_map_status("SOMETHING_NEW", status_table) is JobStatus.FAILED
    assert domain_map_status("", status_table) is JobStatus.FAILED
    assert domain_map_status(None, status_table) is JobStatus.FAILED
