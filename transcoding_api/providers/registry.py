"""Immutable provider registry mapping provider names to factories."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .elastic_transcoder import ELASTIC_TRANSCODER_PROVIDER_NAME, elastic_transcoder_provider_factory
from .interfaces import ProviderFactory


class ProviderRegistry:
    """Read-only lookup of provider factories by provider name.

    The factory map is copied at construction and exposed through a read-only
    proxy, so lookups are safe from concurrent request handlers.
    """

    def __init__(self, factories: Mapping[str, ProviderFactory]):
        """Initialize registry with a fixed factory map.

        Args:
            factories: Provider name to factory mapping.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when a provider name is blank or a factory is None.
        """

        normalized_factories: dict[str, ProviderFactory] = {}
        for provider_name, factory in factories.items():
            normalized_name = provider_name.strip()
            if not normalized_name:
                raise ValueError("provider name must not be blank")
            if factory is None:
                raise ValueError(f"factory for provider={normalized_name} must not be None")
            normalized_factories[normalized_name] = factory

        self._factories: Mapping[str, ProviderFactory] = MappingProxyType(normalized_factories)

    def registry_get_factory(self, provider_name: str) -> ProviderFactory | None:
        """Return the factory registered for a provider name.

        Args:
            provider_name: Provider name from the request or job record.

        Returns:
            ProviderFactory | None: Registered factory or None when unknown.
        """

        return self._factories.get(provider_name)

    def registry_provider_names(self) -> tuple[str, ...]:
        """Return registered provider names in sorted order."""

        return tuple(sorted(self._factories))


def registry_create_default() -> ProviderRegistry:
    """Build the registry holding every built-in provider.

    Returns:
        ProviderRegistry: Registry with built-in provider factories.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return ProviderRegistry({ELASTIC_TRANSCODER_PROVIDER_NAME: elastic_transcoder_provider_factory})
