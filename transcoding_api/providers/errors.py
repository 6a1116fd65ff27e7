"""Project-native typed exceptions for transcoding provider failures."""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for provider-layer failures raised by this project.

    Attributes:
        provider_name: Optional provider label for diagnostics.
    """

    def __init__(self, message: str, provider_name: str | None = None):
        super().__init__(message)
        self.provider_name = provider_name


class ProviderInvalidConfigError(ProviderError, ValueError):
    """Provider sub-config is missing mandatory fields."""


class ProviderJobNotFoundError(ProviderError, LookupError):
    """Backend reports that the requested job does not exist."""
