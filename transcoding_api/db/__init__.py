"""Database layer package for all SQL and persistence boundaries."""

from .health import SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort, JobRecord, JobRecordPersistenceError, JobRecordRepositoryPort
from .job_record import SQLAlchemyJobRecordService
from .session import db_create_engine

__all__ = [
	"DatabaseHealthPort",
	"JobRecord",
	"JobRecordPersistenceError",
	"JobRecordRepositoryPort",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyJobRecordService",
	"db_create_engine",
]
