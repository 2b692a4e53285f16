"""Configuration model for the chat completion relay.

Public API (the "studs"):
    RelayConfig: Configuration model for the relay
    load_config: Resolve configuration from an optional YAML file plus env
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from chat_relay.llm.exceptions import ConfigurationError

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"

# Data-driven mapping: config_field -> env_var
_ENV_MAP: dict[str, str] = {
    "api_key": "OPENAI_API_KEY",
    "model": "OPENAI_MODEL",
    "endpoint": "OPENAI_CHAT_ENDPOINT",
    "timeout_seconds": "OPENAI_TIMEOUT_SECONDS",
    "raise_provider_errors": "CHAT_RELAY_RAISE_PROVIDER_ERRORS",
}

# Optional section name in YAML config files
_YAML_SECTION = "openai"


class RelayConfig(BaseModel):
    """Configuration model for the relay.

    The API key is optional at construction; a missing key is reported by
    the completion handler as a ConfigurationError at call time.

    Attributes:
        api_key: Bearer token for the provider
        model: Model identifier sent with every request
        endpoint: Chat-completions URL
        timeout_seconds: Request deadline, None to block indefinitely
        raise_provider_errors: Raise ProviderError instead of returning the
            provider's error message as a reply
    """

    api_key: SecretStr | None = Field(None, description="API key")
    model: str = Field(DEFAULT_MODEL, min_length=1, description="Model identifier")
    endpoint: str = Field(DEFAULT_ENDPOINT, description="Chat-completions endpoint URL")
    timeout_seconds: float | None = Field(
        None, gt=0, le=600, description="Request timeout in seconds (None = no deadline)"
    )
    raise_provider_errors: bool = Field(
        False, description="Raise ProviderError for provider-reported errors"
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only key as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Validate endpoint URL starts with http:// or https://."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"endpoint must start with 'https://' or 'http://': {v!r}")
        return v

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None

    @classmethod
    def _env_values(cls) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field, env_var in _ENV_MAP.items():
            value = os.environ.get(env_var)
            if value is not None:
                values[field] = value
        return values

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Create RelayConfig from environment variables.

        Environment variables:
            OPENAI_API_KEY: Provider API key
            OPENAI_MODEL: Model identifier (default: gpt-3.5-turbo)
            OPENAI_CHAT_ENDPOINT: Chat-completions URL
            OPENAI_TIMEOUT_SECONDS: Request timeout in seconds
            CHAT_RELAY_RAISE_PROVIDER_ERRORS: "true" to raise ProviderError

        Returns:
            RelayConfig instance

        Raises:
            ValidationError: If a variable holds an invalid value
        """
        return cls(**cls._env_values())

    @classmethod
    def from_yaml(cls, path: Path | str) -> "RelayConfig":
        """Create RelayConfig from a YAML file.

        Fields may sit at the top level or under an ``openai:`` section.

        Args:
            path: Path to the YAML file

        Returns:
            RelayConfig instance

        Raises:
            ConfigurationError: If the file can't be read or isn't a mapping
        """
        return cls(**_read_yaml(Path(path)))


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    section = data.get(_YAML_SECTION)
    if isinstance(section, dict):
        data = section

    return {k: v for k, v in data.items() if k in RelayConfig.model_fields}


def load_config(path: Path | str | None = None) -> RelayConfig:
    """Resolve relay configuration.

    Values from the YAML file (if given) are overridden by environment
    variables.

    Args:
        path: Optional YAML config file

    Returns:
        RelayConfig instance

    Raises:
        ConfigurationError: If the file is unusable or a value is invalid
    """
    values: dict[str, Any] = {}
    if path is not None:
        values.update(_read_yaml(Path(path)))
    values.update(RelayConfig._env_values())

    try:
        return RelayConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid relay configuration: {e}") from e


__all__ = ["RelayConfig", "load_config", "DEFAULT_MODEL", "DEFAULT_ENDPOINT"]
