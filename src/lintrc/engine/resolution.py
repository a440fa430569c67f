from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from lintrc.config import DEFAULT_CONFIG_FILENAME, LintConfig, load_config
from lintrc.engine.types import RuleKey, RuleOverride, Severity
from lintrc.errors import ConfigError, RuleConfigError
from lintrc.rules.base import BaseRule

logger = logging.getLogger(__name__)

_NOT_CONFIGURED = RuleOverride(severity=Severity.OFF)


def is_rule_active(rule: BaseRule, extends: frozenset[str], overrides: Mapping[RuleKey, RuleOverride]) -> bool:
    """
    Presets provide the default; an explicit `rules` entry always wins.

    An explicit entry can both turn off a preset-enabled rule and turn on a rule
    that no preset enabled.
    """

    entry = overrides.get(rule.key)
    in_extends = rule.category in extends
    explicit = entry is not None
    severity = entry.severity if entry is not None else _NOT_CONFIGURED.severity
    return (in_extends and not explicit) or severity.is_enabled()


def resolve_rules(
    catalog: Iterable[BaseRule],
    extends: frozenset[str],
    overrides: Mapping[RuleKey, RuleOverride],
) -> list[BaseRule]:
    """
    Compute the active, configured rules for one run, sorted by rule name.

    Only rules in `catalog` can be returned. A `ConfigError` raised by a rule
    while reading its own options aborts resolution as `RuleConfigError`.
    """

    resolved: list[BaseRule] = []
    seen: set[RuleKey] = set()
    for rule in catalog:
        key = rule.key
        if key in seen:
            continue
        seen.add(key)

        if not is_rule_active(rule, extends, overrides):
            continue

        entry = overrides.get(key, _NOT_CONFIGURED)
        try:
            resolved.append(rule.configure(entry.config))
        except ConfigError as exc:
            raise RuleConfigError(str(key), exc) from exc

    unknown = sorted(str(k) for k in overrides if k not in seen)
    if unknown:
        logger.debug("ignoring %d rule(s) not in catalog: %s", len(unknown), ", ".join(unknown))

    resolved.sort(key=lambda r: r.name)
    logger.debug("resolved %d active rule(s)", len(resolved))
    return resolved


def resolve_config(config: LintConfig, catalog: Iterable[BaseRule] | None = None) -> list[BaseRule]:
    if catalog is None:
        from lintrc.rules.registry import builtin_rules

        catalog = builtin_rules()
    return resolve_rules(catalog, config.extends, config.overrides)


def resolve_config_file(
    path: Path | str = DEFAULT_CONFIG_FILENAME,
    catalog: Iterable[BaseRule] | None = None,
) -> list[BaseRule]:
    return resolve_config(load_config(path), catalog)
