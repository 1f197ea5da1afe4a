"""Unit tests for ClientSettings."""

import pytest
from pydantic import ValidationError

from shiplink import ClientSettings
from shiplink.core.config import DEFAULT_API_BASE_URL, EnvironmentOption

SETTINGS_ENV_VARS = (
    "SHIPLINK_API_KEY",
    "SHIPLINK_API_BASE_URL",
    "SHIPLINK_REQUEST_TIMEOUT",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_settings(**values) -> ClientSettings:
    return ClientSettings(_env_file=None, **values)


class TestDefaults:
    def test_defaults(self):
        settings = make_settings()

        assert settings.SHIPLINK_API_KEY is None
        assert settings.SHIPLINK_API_BASE_URL == DEFAULT_API_BASE_URL
        assert settings.SHIPLINK_REQUEST_TIMEOUT == 60.0
        assert settings.ENVIRONMENT == EnvironmentOption.LOCAL

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPLINK_API_KEY", "sk_env")
        monkeypatch.setenv("SHIPLINK_REQUEST_TIMEOUT", "5")

        settings = make_settings()

        assert settings.SHIPLINK_API_KEY.get_secret_value() == "sk_env"
        assert settings.SHIPLINK_REQUEST_TIMEOUT == 5.0

    def test_api_key_hidden_in_repr(self):
        settings = make_settings(SHIPLINK_API_KEY="sk_secret")

        assert "sk_secret" not in repr(settings)


class TestBaseURL:
    def test_trailing_slash_stripped(self):
        assert make_settings(SHIPLINK_API_BASE_URL="https://api.shiplink.test/v2/").SHIPLINK_API_BASE_URL == (
            "https://api.shiplink.test/v2"
        )

    def test_protocol_required(self):
        with pytest.raises(ValidationError, match="http:// or https://"):
            make_settings(SHIPLINK_API_BASE_URL="api.shiplink.test/v2")


class TestEnvironment:
    def test_local_allows_http(self):
        settings = make_settings(SHIPLINK_API_BASE_URL="http://localhost:8080/v2")

        assert settings.SHIPLINK_API_BASE_URL == "http://localhost:8080/v2"

    def test_staging_warns_on_http(self):
        with pytest.warns(UserWarning, match="staging"):
            make_settings(ENVIRONMENT="staging", SHIPLINK_API_BASE_URL="http://staging.shiplink.test/v2")

    def test_production_rejects_http(self):
        with pytest.raises(ValidationError, match="https://"):
            make_settings(
                ENVIRONMENT="production",
                SHIPLINK_API_KEY="sk_live",
                SHIPLINK_API_BASE_URL="http://api.shiplink.test/v2",
            )

    def test_production_warns_without_key(self):
        with pytest.warns(UserWarning, match="SHIPLINK_API_KEY"):
            make_settings(ENVIRONMENT="production")
