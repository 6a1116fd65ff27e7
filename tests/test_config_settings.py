"""Tests for runtime settings loading and provider sub-config parsing."""

from __future__ import annotations

import pytest

from transcoding_api.config import AppSettings, SettingsLoadError, config_load_settings


def test_config_settings_reads_nested_provider_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read Elastic Transcoder sub-config from nested environment variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate nested parsing.

    Raises:
        AssertionError: Raised when nested values are not applied.
    """

    monkeypatch.setenv("ELASTIC_TRANSCODER__ACCESS_KEY_ID", "AKIANOTREALLY")
    monkeypatch.setenv("ELASTIC_TRANSCODER__SECRET_ACCESS_KEY", "really-secret")
    monkeypatch.setenv("ELASTIC_TRANSCODER__PIPELINE_ID", " mypipeline ")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.elastic_transcoder.access_key_id == "AKIANOTREALLY"
    assert settings.elastic_transcoder.secret_access_key == "really-secret"
    assert settings.elastic_transcoder.pipeline_id == "mypipeline"
    assert settings.elastic_transcoder.region == ""
    assert settings.log_level == "DEBUG"


def test_config_settings_provider_fields_default_to_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable_name in ("ACCESS_KEY_ID", "SECRET_ACCESS_KEY", "PIPELINE_ID", "REGION"):
        monkeypatch.delenv(f"ELASTIC_TRANSCODER__{variable_name}", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.elastic_transcoder.access_key_id == ""
    assert settings.elastic_transcoder.pipeline_id == ""


def test_config_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APPLICATION_PORT", "0")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()
