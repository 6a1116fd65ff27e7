"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or runs one job status lookup from the command line.
"""

import argparse
import json
import logging

import uvicorn

from transcoding_api.api.routers.jobs import api_serialize_job_status
from transcoding_api.bootstrap import bootstrap_create_application, bootstrap_create_dispatch_service
from transcoding_api.config import AppSettings, config_load_settings
from transcoding_api.jobs import DispatchError, JobDispatchPort

logger = logging.getLogger(__name__)


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with a non-zero code when `job-status` fails.
    """

    argument_parser = argparse.ArgumentParser(description="Video transcoding API runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "job-status"),
        help="Runtime command: `api` starts server, `job-status` prints live status of one job",
        type=str,
    )
    argument_parser.add_argument(
        "--job-id",
        dest="job_id",
        type=str,
        help="Internal job id for `job-status`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    main_configure_logging(settings)

    if parsed_arguments.command == "job-status":
        if not (parsed_arguments.job_id or "").strip():
            argument_parser.error("--job-id is required for `job-status`")
        raise SystemExit(main_print_job_status(settings=settings, job_id=parsed_arguments.job_id.strip()))

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level.lower(),
    )


def main_configure_logging(settings: AppSettings) -> None:
    """Configure root logging from settings."""

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main_print_job_status(
    settings: AppSettings,
    job_id: str,
    dispatch_service: JobDispatchPort | None = None,
) -> int:
    """Print live normalized status of one job as JSON.

    Args:
        settings: Validated runtime settings.
        job_id: Internal job identifier.
        dispatch_service: Optional dispatch service; one bound to the configured
            record store is built when omitted.

    Returns:
        int: Process exit code, 0 on success.
    """

    if dispatch_service is None:
        dispatch_service = bootstrap_create_dispatch_service(settings=settings)
    try:
        job_status = dispatch_service.job_get_status(job_id)
    except DispatchError as error:
        logger.error("job status lookup failed kind=%s: %s", error.kind.value, error)
        return 1

    print(json.dumps(api_serialize_job_status(job_status)))
    return 0


if __name__ == "__main__":
    main()
