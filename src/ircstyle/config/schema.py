"""Config schema and accessor."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ircstyle.config.loader import CONFIG_DEFAULTS
from ircstyle.core.errors import IrcStyleConfigurationError

OUTPUT_FORMATS = ("html", "text", "json")


class Config:
    """Validated view over a resolved config dict."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data = data or {}

    def reload(self, data: dict[str, Any], *, validate: bool = True) -> None:
        """Replace config data."""
        self._data = data or {}
        if validate:
            self._validate()
        logger.debug(
            "Config reloaded: format={} prefix={!r}", self.output_format, self.class_prefix
        )

    def _value(self, key: str) -> Any:
        return self._data.get(key, CONFIG_DEFAULTS[key])

    def _validate(self) -> None:
        """Validate config values; raise IrcStyleConfigurationError on failure."""
        prefix = self._value("class_prefix")
        if not isinstance(prefix, str) or not prefix:
            raise IrcStyleConfigurationError(
                "class_prefix must be a non-empty string",
                code="invalid_class_prefix",
                details={"value": prefix},
            )
        placeholder = self._value("placeholder")
        if not isinstance(placeholder, str) or not placeholder:
            raise IrcStyleConfigurationError(
                "placeholder must be a non-empty string",
                code="invalid_placeholder",
                details={"value": placeholder},
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise IrcStyleConfigurationError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}",
                code="invalid_output_format",
                details={"value": self.output_format},
            )

    @property
    def class_prefix(self) -> str:
        return str(self._value("class_prefix"))

    @property
    def placeholder(self) -> str:
        return str(self._value("placeholder"))

    @property
    def output_format(self) -> str:
        return str(self._value("output_format")).lower()


cfg: Config = Config({})
