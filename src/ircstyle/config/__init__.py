"""Configuration: YAML + env overlay."""

from ircstyle.config.loader import (
    CONFIG_DEFAULTS,
    _deep_update,
    env_overrides,
    load_config,
    load_config_with_env,
)
from ircstyle.config.schema import OUTPUT_FORMATS, Config, cfg

__all__ = [
    "CONFIG_DEFAULTS",
    "OUTPUT_FORMATS",
    "Config",
    "_deep_update",
    "cfg",
    "env_overrides",
    "load_config",
    "load_config_with_env",
]
