import warnings
from enum import Enum
from typing import Self

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..version import __version__

DEFAULT_API_BASE_URL = "https://api.easypost.com/v2"
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_USER_AGENT = f"shiplink-python/{__version__}"


class APISettings(BaseSettings):
    SHIPLINK_API_KEY: SecretStr | None = None
    SHIPLINK_API_BASE_URL: str = DEFAULT_API_BASE_URL

    @field_validator("SHIPLINK_API_BASE_URL", mode="after")
    @classmethod
    def validate_base_url(cls, url: str) -> str:
        if not (url.startswith("http://") or url.startswith("https://")):
            raise ValueError(
                f"SHIPLINK_API_BASE_URL must define its protocol and start with http:// or https://. "
                f"Received '{url}'."
            )
        return url.rstrip("/")


class HTTPSettings(BaseSettings):
    SHIPLINK_REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT
    SHIPLINK_USER_AGENT: str = DEFAULT_USER_AGENT


class ConsoleLogSettings(BaseSettings):
    CONSOLE_LOG_LEVEL: str = "INFO"
    CONSOLE_LOG_FORMAT_JSON: bool = False
    CONSOLE_LOG_INCLUDE_PATH: bool = True
    CONSOLE_LOG_INCLUDE_METHOD: bool = True
    CONSOLE_LOG_INCLUDE_STATUS_CODE: bool = True


class EnvironmentOption(str, Enum):
    LOCAL = "local"
    STAGING = "staging"
    PRODUCTION = "production"


class EnvironmentSettings(BaseSettings):
    ENVIRONMENT: EnvironmentOption = EnvironmentOption.LOCAL


class ClientSettings(
    APISettings,
    HTTPSettings,
    ConsoleLogSettings,
    EnvironmentSettings,
):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_environment_settings(self) -> Self:
        "The validation should not modify any of the settings. It should provide"
        "feedback to the user if any misconfiguration is detected."
        if self.ENVIRONMENT == EnvironmentOption.LOCAL:
            pass
        elif self.ENVIRONMENT == EnvironmentOption.STAGING:
            if not self.SHIPLINK_API_BASE_URL.startswith("https://"):
                warnings.warn(
                    "In a staging environment SHIPLINK_API_BASE_URL should use https://. "
                    f"Received '{self.SHIPLINK_API_BASE_URL}'."
                )
        elif self.ENVIRONMENT == EnvironmentOption.PRODUCTION:
            if not self.SHIPLINK_API_BASE_URL.startswith("https://"):
                raise ValueError(
                    "In production, SHIPLINK_API_BASE_URL must start with the https:// protocol. "
                    f"Received '{self.SHIPLINK_API_BASE_URL}'."
                )
            if self.SHIPLINK_API_KEY is None:
                warnings.warn(
                    "No SHIPLINK_API_KEY configured. Every call will need an explicit api_key."
                )
        return self
