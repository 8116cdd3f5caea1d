"""Config loading: defaults, YAML file, env, then caller overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ircstyle.formatting.control_codes import CONTROL_PLACEHOLDER
from ircstyle.formatting.renderer import DEFAULT_CLASS_PREFIX

CONFIG_DEFAULTS: dict[str, Any] = {
    "class_prefix": DEFAULT_CLASS_PREFIX,
    "placeholder": CONTROL_PLACEHOLDER,
    "output_format": "html",
}

# Env var -> config key
ENV_OVERRIDES: dict[str, str] = {
    "IRCSTYLE_CLASS_PREFIX": "class_prefix",
    "IRCSTYLE_PLACEHOLDER": "placeholder",
    "IRCSTYLE_OUTPUT_FORMAT": "output_format",
}


def _deep_update(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_update(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path) -> dict[str, Any]:
    """Load the YAML file with SafeLoader. Missing or non-mapping files give {}."""
    path = Path(path)
    if not path.exists():
        logger.debug("Config file not found: {}", path)
        return {}

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        logger.error("Failed to parse config {}: {}", path, exc)
        raise
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file {} has invalid structure (expected dict)", path)
        return {}
    return data


def env_overrides() -> dict[str, str]:
    """Config values taken from IRCSTYLE_* variables; empty values are ignored."""
    return {key: os.environ[var] for var, key in ENV_OVERRIDES.items() if os.environ.get(var)}


def load_config_with_env(
    path: str | Path, overrides: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Resolve the effective config.

    Layers, lowest first: CONFIG_DEFAULTS, the YAML file, IRCSTYLE_* variables
    (after loading .env from the working directory), then ``overrides``.
    """
    from dotenv import find_dotenv, load_dotenv

    load_dotenv(find_dotenv(usecwd=True))
    data = _deep_update(CONFIG_DEFAULTS, load_config(path))
    data = _deep_update(data, env_overrides())
    return _deep_update(data, overrides or {})
