"""Domain models used across application layer boundaries."""

from .models import HealthStatus, ProviderJobStatus, TranscodeJobRequest
from .status import JobStatus, domain_map_status

__all__ = ["HealthStatus", "JobStatus", "ProviderJobStatus", "TranscodeJobRequest", "domain_map_status"]
