"""Configuration loading for Supermemory MCP."""

import os
import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

API_KEY_VAR = "SUPERMEMORY_API_KEY"
USER_ID_VAR = "SUPERMEMORY_USER_ID"
BASE_URL_VAR = "SUPERMEMORY_BASE_URL"

DEFAULT_USER_ID = "default-user"
DEFAULT_BASE_URL = "https://api.supermemory.ai"

CONFIG_FILE_NAMES = [".supermemory-mcp.yaml", ".supermemory-mcp.yml"]

_ENV_REF = re.compile(r"\$\{([^}]+)\}")

# Config field -> environment variable that can supply it
_ENV_FIELDS = {
    "api_key": API_KEY_VAR,
    "user_id": USER_ID_VAR,
    "base_url": BASE_URL_VAR,
}


class ConfigError(Exception):
    """Raised when the server cannot be configured."""


class SupermemoryConfig(BaseModel):
    """Process-wide settings, fixed at startup."""

    api_key: str = Field(min_length=1)
    user_id: str = Field(default=DEFAULT_USER_ID, min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0)


def _substitute_env_vars(obj):
    """Recursively substitute ${VAR} with environment variables.

    References to unset variables are left in place; see _is_unset().
    """
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(0)), obj)
    elif isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_substitute_env_vars(item) for item in obj]
    return obj


def _is_unset(value) -> bool:
    """True for missing values and values still holding a ${VAR} reference."""
    if value is None or value == "":
        return True
    return isinstance(value, str) and _ENV_REF.search(value) is not None


def find_config_file(base: str | Path = ".") -> Path | None:
    """Auto-detect a config file in the given directory."""
    base = Path(base)
    for name in CONFIG_FILE_NAMES:
        if (base / name).exists():
            return base / name
    return None


def load_config(config_file: str | Path | None = None) -> SupermemoryConfig:
    """Load config from an optional YAML file and the environment.

    Values from the file win; fields it leaves out are taken from the
    environment. Empty environment variables count as unset, as do file
    values that reference an unset variable.
    """
    config_path = Path(config_file) if config_file else find_config_file()

    data = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping")
        data = _substitute_env_vars(data)

    for field_name, var in _ENV_FIELDS.items():
        if _is_unset(data.get(field_name)):
            data.pop(field_name, None)
            value = os.environ.get(var)
            if value:
                data[field_name] = value

    if "api_key" not in data:
        raise ConfigError(f"{API_KEY_VAR} environment variable is required")

    try:
        return SupermemoryConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
