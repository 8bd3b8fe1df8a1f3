"""Dev-services options read from environment variables and a .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from infinispan_devservices.config import DevServicesConfig
from infinispan_devservices.exceptions import ConfigurationError
from infinispan_devservices.schema import DEFAULT_SERVICE_NAME

ENV_PREFIX = "INFINISPAN_CLIENT_DEVSERVICES_"


class DevServicesSettings(BaseSettings):
    """Dev-services options read from the environment.

    All values can be overridden via environment variables. Prefix: ``INFINISPAN_CLIENT_DEVSERVICES_``.
    ``ARTIFACTS`` takes a JSON list and ``CACHES`` a JSON object of cache name to template.
    """

    enabled: bool = True
    port: int | None = None
    shared: bool = True
    service_name: str = DEFAULT_SERVICE_NAME
    artifacts: list[str] | None = None
    caches: dict[str, str] = Field(
        default_factory=dict,
        description="Caches to pre-create, e.g. {\"cache1\": \"DIST_SYNC\"}. Templates are not validated here.",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    def to_config(self) -> DevServicesConfig:
        return DevServicesConfig(**self.model_dump())


def load_from_env(env_file: str | Path | None = ".env") -> DevServicesConfig:
    """Build the configuration from the environment and an optional ``.env`` file.

    Raises:
        ConfigurationError: If an environment value is malformed.
    """
    try:
        settings = DevServicesSettings(_env_file=env_file)
    except ValidationError as exc:
        errors = exc.errors()
        keys = sorted({ENV_PREFIX + str(error["loc"][0]).upper() for error in errors})
        raise ConfigurationError(
            message="Invalid dev-services environment value",
            error_code="invalid_option",
            details={"keys": keys, "errors": [error["msg"] for error in errors]},
        ) from exc
    except SettingsError as exc:
        raise ConfigurationError(
            message="Invalid dev-services environment value",
            error_code="invalid_option",
            details={"errors": [str(exc)]},
        ) from exc
    return settings.to_config()
