"""Global configuration management for stagenote.

Handles user-level configuration stored in ~/.stagenote/config.yaml:
the text-generation endpoint, model, request timeout and diff size limit.
"""

from pathlib import Path
from typing import Any, Dict

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".stagenote"

# Keys accepted in config.yaml
CONFIG_KEYS = ("api_url", "model", "timeout", "max_diff_chars")


def get_global_config_dir() -> Path:
    """Get the global stagenote configuration directory.

    Returns:
        Path to ~/.stagenote/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.stagenote/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.stagenote/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.stagenote/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.stagenote/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def set_config_value(key: str, value: Any) -> None:
    """Set a single value in global config.

    Raises:
        GlobalConfigError: If the key is not a known configuration key.
    """
    if key not in CONFIG_KEYS:
        raise GlobalConfigError(
            f"Unknown config key: {key}. Valid keys: {', '.join(CONFIG_KEYS)}"
        )
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def unset_config_value(key: str) -> bool:
    """Remove a value from global config.

    Returns:
        True if the key was present and removed, False otherwise.
    """
    config = load_global_config()
    if key not in config:
        return False
    del config[key]
    save_global_config(config)
    return True


def is_configured() -> bool:
    """Check if a global config file exists."""
    return get_config_file_path().exists()
