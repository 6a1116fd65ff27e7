"""Provider layer package for transcoding backend integration boundaries."""

from .elastic_transcoder import (
	ELASTIC_TRANSCODER_DEFAULT_REGION,
	ELASTIC_TRANSCODER_PROVIDER_NAME,
	ElasticTranscoderProvider,
	elastic_transcoder_provider_factory,
)
from .errors import ProviderError, ProviderInvalidConfigError, ProviderJobNotFoundError
from .interfaces import ProviderFactory, TranscodingProviderPort
from .registry import ProviderRegistry, registry_create_default

__all__ = [
	"ELASTIC_TRANSCODER_DEFAULT_REGION",
	"ELASTIC_TRANSCODER_PROVIDER_NAME",
	"ElasticTranscoderProvider",
	"ProviderError",
	"ProviderFactory",
	"ProviderInvalidConfigError",
	"ProviderJobNotFoundError",
	"ProviderRegistry",
	"TranscodingProviderPort",
	"elastic_transcoder_provider_factory",
	"registry_create_default",
]
