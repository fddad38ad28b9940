"""
Configuration for the Posts Client.

Settings are pydantic-settings models read from ``POSTS_CLIENT_*`` environment
variables (and a local ``.env`` file), validated when built. There is no
module-level instance: the application builds one ``Config`` at startup with
``Config.from_env()`` and passes it to the components that need it.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "POSTS_CLIENT_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_SETTINGS = SettingsConfigDict(
    env_prefix=ENV_PREFIX,
    env_file=".env",
    env_file_encoding="utf-8",
    case_sensitive=False,
    extra="ignore",
)


class APIConfig(BaseSettings):
    """Where to send requests and which fixed headers to attach."""

    model_config = _SETTINGS

    base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        min_length=8,
        description="Base URL of the posts API.",
    )
    timeout_seconds: PositiveFloat = Field(
        default=10.0,
        description="Per-request timeout (seconds).",
    )
    platform: str = Field(default="Python", min_length=1, description="X-Platform header value.")
    auth_token: str = Field(default="1212121212", description="X-Auth-Token header value.")


class LogConfig(BaseSettings):
    """Console and file logging for the CLI."""

    model_config = _SETTINGS

    log_level: LogLevel = "INFO"
    log_directory: Path = Path("logs")
    log_filename: str = "posts_client.log"
    console_format: str = "%(asctime)s | %(levelname)-8s | %(message)s"
    file_format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def log_file_path(self) -> Path:
        return self.log_directory / self.log_filename


class Config(BaseModel):
    """API and logging settings, built once and injected."""

    api: APIConfig = Field(default_factory=APIConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build the configuration from ``POSTS_CLIENT_*`` variables.

        Recognised variables (all optional): ``BASE_URL``, ``TIMEOUT_SECONDS``,
        ``PLATFORM``, ``AUTH_TOKEN``, ``LOG_LEVEL``, ``LOG_DIRECTORY``,
        ``LOG_FILENAME``.

        Raises:
            pydantic.ValidationError: If a variable fails validation, e.g. a
                non-positive timeout or an unknown log level.
        """
        return cls(api=APIConfig(), log=LogConfig())
