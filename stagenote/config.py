"""Configuration for the stagenote text-generation endpoint.

Values are resolved with this precedence:
1. Explicit overrides (CLI options)
2. Environment variables (a repo-level .env file is loaded first)
3. ~/.stagenote/config.yaml
4. Built-in defaults
"""

import os
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from stagenote import global_config


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_API_URL = "http://localhost:11434/api/generate"
DEFAULT_MODEL = "llama3.2"
DEFAULT_TIMEOUT = 120.0
DEFAULT_MAX_DIFF_CHARS = 50000


# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

ENV_VARS = {
    "api_url": "OCO_API_URL",
    "model": "OCO_MODEL",
    "timeout": "OCO_TIMEOUT",
    "max_diff_chars": "OCO_MAX_DIFF_CHARS",
}


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


class AppConfig(BaseModel):
    """Resolved settings for one run.

    Attributes:
        api_url: Text generation endpoint receiving the POST request.
        model: Model identifier sent in the request body.
        timeout: Read timeout in seconds; 0 disables it.
        max_diff_chars: Maximum diff characters included in the prompt.
    """

    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS

    @field_validator("api_url", "model")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def timeout_not_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("timeout must be 0 (disabled) or a positive number of seconds")
        return v

    @field_validator("max_diff_chars")
    @classmethod
    def max_diff_chars_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_diff_chars must be positive")
        return v


def _env_values() -> dict[str, str]:
    values = {}
    for key, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            values[key] = value
    return values


def load_config(overrides: Optional[dict[str, Any]] = None) -> AppConfig:
    """Load configuration from defaults, config file, environment and overrides.

    Args:
        overrides: Values that take precedence over everything else.
            Entries set to None are ignored.

    Returns:
        The validated AppConfig.

    Raises:
        ConfigError: If a resolved value is invalid.
        GlobalConfigError: If the config file cannot be read.
    """
    load_dotenv()

    values: dict[str, Any] = {}
    file_config = global_config.load_global_config()
    values.update({k: v for k, v in file_config.items() if k in ENV_VARS and v is not None})
    values.update(_env_values())
    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AppConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}")
