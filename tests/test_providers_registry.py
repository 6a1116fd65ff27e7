"""Tests for provider registry lookups and immutability."""

from __future__ import annotations

import pytest

from transcoding_api.providers import (
    ELASTIC_TRANSCODER_PROVIDER_NAME,
    ProviderRegistry,
    elastic_transcoder_provider_factory,
    registry_create_default,
)


def _factory_stub(_settings):
    return object()


def test_providers_registry_returns_registered_factory() -> None:
    registry = ProviderRegistry({"fake": _factory_stub})

    assert registry.registry_get_factory("fake") is _factory_stub
    assert registry.registry_get_factory("unknown") is None
    assert registry.registry_provider_names() == ("fake",)


def test_providers_registry_is_not_affected_by_source_mapping_mutation() -> None:
    """Keep lookups stable after the source mapping changes.

    Returns:
        None: Assertions validate the registry copies its input.

    Raises:
        AssertionError: Raised when registry shares mutable state.
    """

    factories = {"fake": _factory_stub}
    registry = ProviderRegistry(factories)

    factories["other"] = _factory_stub
    del factories["fake"]

    assert registry.registry_provider_names() == ("fake",)
    with pytest.raises(TypeError):
        registry._factories["other"] = _factory_stub  # pylint: disable=protected-access


@pytest.mark.parametrize("provider_name", ["", "   "])
def test_providers_registry_rejects_blank_provider_names(provider_name: str) -> None:
    with pytest.raises(ValueError, match="provider name must not be blank"):
        ProviderRegistry({provider_name: _factory_stub})


def test_providers_registry_default_contains_elastic_transcoder() -> None:
    """Register the Elastic Transcoder factory in the default registry.

    Returns:
        None: Assertions validate built-in registration.

    Raises:
        AssertionError: Raised when built-in provider is missing.
    """

    registry = registry_create_default()

    assert registry.registry_provider_names() == (ELASTIC_TRANSCODER_PROVIDER_NAME,)
    assert registry.registry_get_factory("elastictranscoder") is elastic_transcoder_provider_factory
