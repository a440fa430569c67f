from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from lintrc.engine.types import DEFAULT_CATEGORY, RuleKey, RuleOverride, Severity
from lintrc.errors import (
    FileOpenError,
    JsonSyntaxError,
    PropertyShapeError,
    RuleValueError,
    SeverityParseError,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".eslintrc.json"

# Presets we know how to model. Anything else in `extends` is ignored so that
# configs written for newer presets still resolve.
EXTENDS_MAP: Mapping[str, str] = MappingProxyType(
    {
        "eslint:recommended": "eslint",
        "plugin:react/recommended": "react",
        "plugin:@typescript-eslint/recommended": "typescript",
        "plugin:react-hooks/recommended": "react",
        "plugin:unicorn/recommended": "unicorn",
        "plugin:jest/recommended": "jest",
    }
)

_CATEGORY_ALIASES: Mapping[str, str] = MappingProxyType({"typescript-eslint": "typescript"})

_SEVERITY_TOKENS: Mapping[str, Severity] = MappingProxyType(
    {
        "off": Severity.OFF,
        "allow": Severity.OFF,
        "warn": Severity.WARN,
        "error": Severity.ERROR,
        "deny": Severity.ERROR,
    }
)


@dataclass(frozen=True, slots=True)
class LintConfig:
    extends: frozenset[str] = frozenset()
    overrides: Mapping[RuleKey, RuleOverride] = field(default_factory=lambda: MappingProxyType({}))


def parse_rule_key(raw: str) -> RuleKey:
    """
    Split a `rules` key into its (category, name) pair.

    `"no-console"` -> `eslint/no-console`, `"@typescript-eslint/no-explicit-any"`
    -> `typescript/no-explicit-any`. The name is never validated.
    """

    category, sep, name = raw.partition("/")
    if not sep:
        return RuleKey(DEFAULT_CATEGORY, raw)
    category = category.lstrip("@")
    category = _CATEGORY_ALIASES.get(category, category)
    return RuleKey(category, name)


def parse_severity(value: Any) -> Severity:
    """Parse `"warn"` or `["warn", ...]` into a `Severity`."""

    if isinstance(value, list) and value:
        return _severity_token(value[0])
    return _severity_token(value)


def _severity_token(token: Any) -> Severity:
    # Only a bare string is a token; nested arrays are rejected.
    if isinstance(token, str):
        severity = _SEVERITY_TOKENS.get(token)
        if severity is not None:
            return severity
    raise SeverityParseError(token)


def resolve_rule_value(value: Any) -> tuple[Severity, Any | None]:
    """
    Resolve the level of a rule and its config.

    Two shapes are accepted:

        "rule": "off"
        "rule": ["off", {"some": "config"}]
    """

    if isinstance(value, str):
        return _severity_token(value), None
    if isinstance(value, list) and value:
        config = value[1] if len(value) > 1 else None
        return _severity_token(value[0]), config
    raise RuleValueError(value)


def parse_extends(document: Any) -> frozenset[str] | None:
    if not isinstance(document, dict) or "extends" not in document:
        return None

    extends = document["extends"]
    if not isinstance(extends, list):
        raise PropertyShapeError("extends", "Expected an array.")

    categories: set[str] = set()
    for preset in extends:
        if not isinstance(preset, str):
            continue
        category = EXTENDS_MAP.get(preset)
        if category is None:
            logger.debug("ignoring unknown preset %r", preset)
            continue
        categories.add(category)
    return frozenset(categories)


def parse_rules(document: Any) -> Mapping[RuleKey, RuleOverride]:
    if not isinstance(document, dict):
        return MappingProxyType({})
    rules = document.get("rules")
    if not isinstance(rules, dict):
        return MappingProxyType({})

    overrides: dict[RuleKey, RuleOverride] = {}
    for raw_key, raw_value in rules.items():
        key = parse_rule_key(raw_key)
        severity, config = resolve_rule_value(raw_value)
        overrides[key] = RuleOverride(severity=severity, config=config)
    return MappingProxyType(overrides)


def parse_config_document(document: Any) -> LintConfig:
    extends = parse_extends(document)
    return LintConfig(
        extends=extends if extends is not None else frozenset(),
        overrides=parse_rules(document),
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def load_config(path: Path | str = DEFAULT_CONFIG_FILENAME) -> LintConfig:
    """
    Read and parse an ESLint-style JSON config file.

    Any failure aborts loading; a partially parsed config is never returned.
    """

    config_path = Path(path)
    logger.debug("loading config from %s", config_path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOpenError(config_path, exc) from exc

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise JsonSyntaxError(config_path, str(exc)) from exc

    try:
        return parse_config_document(document)
    except PropertyShapeError as exc:
        raise JsonSyntaxError(config_path, str(exc)) from exc
