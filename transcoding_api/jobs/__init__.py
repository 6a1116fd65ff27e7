"""Job layer package for transcoding dispatch boundaries."""

from .dispatch_service import TranscodingDispatchService
from .interfaces import DispatchError, DispatchErrorKind, JobDispatchPort

__all__ = [
	"DispatchError",
	"DispatchErrorKind",
	"JobDispatchPort",
	"TranscodingDispatchService",
]
