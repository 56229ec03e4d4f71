"""
Configuration model for the langgame server.

Values come from environment variables (a ``.env`` file is loaded by the
entry point before this model is built) and can be overridden on the command
line.
"""

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

WORDS_PER_ROUND = 10
MIN_WORD_LEN = 3
DICTIONARY_EXTENSION = ".dic"
DISCOVERY_MAX_DEPTH = 3

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

CORPUS_REPO_URL = "https://github.com/LibreOffice/dictionaries.git"
BASE_DIR_NAME = ".langgame"
CORPUS_DIR_NAME = "dictionaries"

# Environment variable -> GameConfig field
ENV_FIELDS: dict[str, str] = {
    "LANGGAME_DATA_DIR": "data_dir",
    "LANGGAME_REPO_URL": "repo_url",
    "LANGGAME_CLONE_TIMEOUT": "clone_timeout",
    "LANGGAME_HOST": "host",
    "LANGGAME_PORT": "port",
    "LANGGAME_LOG_LEVEL": "log_level",
}


class ConfigError(Exception):
    """Missing or invalid configuration. Fatal at startup."""
    pass


def default_data_dir(environ: Mapping[str, str] | None = None) -> Path:
    """
    Return ``$HOME/.langgame``.

    Raises:
        ConfigError: If HOME is not set
    """
    environ = os.environ if environ is None else environ
    home = environ.get("HOME")
    if not home:
        raise ConfigError("HOME is not set; cannot locate the dictionary directory")
    return Path(home) / BASE_DIR_NAME


class GameConfig(BaseModel):
    """Runtime settings for the language guessing server."""

    data_dir: Path = Field(
        description="Base directory holding the cloned dictionary corpus"
    )
    repo_url: str = Field(
        default=CORPUS_REPO_URL,
        description="Git URL of the dictionary corpus"
    )
    clone_timeout: float = Field(
        default=600.0,
        gt=0.0,
        description="Maximum seconds to wait for the initial clone"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port"
    )
    log_level: str = Field(
        default="INFO",
        description="Name of a standard logging level"
    )

    @field_validator("repo_url")
    @classmethod
    def validate_repo_url(cls, v: str) -> str:
        """Ensure the repository URL is non-empty."""
        if not v or not v.strip():
            raise ValueError("repo_url cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is one that logging understands."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @property
    def corpus_dir(self) -> Path:
        """Directory the dictionary corpus is cloned into."""
        return self.data_dir / CORPUS_DIR_NAME

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "GameConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Field values that take precedence over the environment;
                None values are ignored

        Returns:
            Validated GameConfig

        Raises:
            ConfigError: If HOME is needed but unset, or a value is invalid
        """
        environ = os.environ if environ is None else environ

        values: dict[str, Any] = {}
        for env_name, field_name in ENV_FIELDS.items():
            raw = environ.get(env_name)
            if raw:
                values[field_name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})

        if "data_dir" not in values:
            values["data_dir"] = default_data_dir(environ)

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


__all__ = [
    "WORDS_PER_ROUND",
    "MIN_WORD_LEN",
    "DICTIONARY_EXTENSION",
    "DISCOVERY_MAX_DEPTH",
    "CORPUS_REPO_URL",
    "ConfigError",
    "GameConfig",
    "default_data_dir",
]
