from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class ConfigError(ValueError):
    """Raised when a lint configuration cannot be resolved."""


def _render_value(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)


class FileOpenError(ConfigError):
    def __init__(self, path: Path, cause: OSError | UnicodeDecodeError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to open config file {path}: {cause}")


class JsonSyntaxError(ConfigError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Failed to parse config {path}: {message}")


class PropertyShapeError(ConfigError):
    def __init__(self, prop: str, message: str) -> None:
        self.prop = prop
        self.message = message
        super().__init__(f"`{prop}` is invalid. {message}")


class RuleValueError(ConfigError):
    def __init__(self, value: Any, message: str = "Invalid rule value") -> None:
        self.value = value
        self.message = message
        super().__init__(f"{message}: {_render_value(value)}")


class SeverityParseError(ConfigError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid severity {_render_value(value)}; expected one of: off, allow, warn, error, deny."
        )


class RuleConfigError(ConfigError):
    """A rule rejected the configuration supplied for it."""

    def __init__(self, rule: str, cause: ConfigError) -> None:
        self.rule = rule
        self.cause = cause
        super().__init__(f"Invalid configuration for rule `{rule}`: {cause}")


class CatalogError(ConfigError):
    """Raised when a rule catalog contains conflicting descriptors."""
