"""YAML config loader with environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from weatherdex.config.schema import AppConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WEATHERDEX_CONFIG"
PORT_ENV_VAR = "PORT"


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, the schema defaults apply.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def apply_env_overrides(
    config: AppConfig, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Return a copy of ``config`` with ``PORT`` applied from the environment."""
    environ = os.environ if environ is None else environ
    port = environ.get(PORT_ENV_VAR)
    if not port:
        return config
    data = config.model_dump()
    data["server"]["port"] = int(port)
    logger.debug("Port overridden from environment: %s", port)
    return AppConfig(**data)


def resolve_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> AppConfig:
    """Load config from ``path`` (or ``WEATHERDEX_CONFIG``) and apply env overrides."""
    environ = os.environ if environ is None else environ
    if path is None:
        path = environ.get(CONFIG_ENV_VAR) or None
    return apply_env_overrides(load_config(path), environ)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
