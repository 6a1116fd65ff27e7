"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI
from sqlalchemy import Engine

from transcoding_api.api import create_api_application
from transcoding_api.config import AppSettings, config_load_settings
from transcoding_api.db import SQLAlchemyDatabaseHealthService, SQLAlchemyJobRecordService, db_create_engine
from transcoding_api.jobs import TranscodingDispatchService
from transcoding_api.providers import ProviderRegistry, registry_create_default


def bootstrap_create_dispatch_service(
    settings: AppSettings,
    provider_registry: ProviderRegistry | None = None,
) -> TranscodingDispatchService:
    """Build dispatch service bound to the configured record store.

    Args:
        settings: Validated runtime settings.
        provider_registry: Optional registry; built-in providers are used when omitted.

    Returns:
        TranscodingDispatchService: Fully wired dispatch service.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    engine = db_create_engine(database_url=settings.database_url)
    return _bootstrap_wire_dispatch_service(
        settings=settings,
        engine=engine,
        provider_registry=provider_registry or registry_create_default(),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-loaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    engine = db_create_engine(database_url=resolved_settings.database_url)
    provider_registry = registry_create_default()
    return create_api_application(
        settings=resolved_settings,
        db_health_service=SQLAlchemyDatabaseHealthService(engine=engine),
        dispatch_service=_bootstrap_wire_dispatch_service(
            settings=resolved_settings,
            engine=engine,
            provider_registry=provider_registry,
        ),
        provider_registry=provider_registry,
    )


def _bootstrap_wire_dispatch_service(
    settings: AppSettings,
    engine: Engine,
    provider_registry: ProviderRegistry,
) -> TranscodingDispatchService:
    return TranscodingDispatchService(
        provider_registry=provider_registry,
        job_record_repository=SQLAlchemyJobRecordService(engine=engine),
        settings=settings,
    )
