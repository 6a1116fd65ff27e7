"""Database health service for job record store connectivity checks."""

from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError

from transcoding_api.domain import HealthStatus

from .interfaces import DatabaseHealthPort


class SQLAlchemyDatabaseHealthService(DatabaseHealthPort):
    """Health service that probes the job record store through the shared engine."""

    def __init__(self, engine: Engine):
        if engine is None:
            raise ValueError("engine must not be None")
        self._engine = engine

    def db_connection_label(self) -> str:
        """Return the target database URL with the password masked."""

        return self._engine.url.render_as_string(hide_password=True)

    def db_check_health(self) -> HealthStatus:
        """Run a trivial query against the record store.

        Returns:
            HealthStatus: Health payload with status and diagnostic detail.

        Raises:
            ConnectionError: Raised when connectivity check fails.
        """

        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as error:
            raise ConnectionError("job record store connectivity check failed") from error
        return HealthStatus(status="ok", detail="job record store reachable")
