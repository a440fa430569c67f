from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable
from types import ModuleType
from typing import Any

from lintrc.errors import ConfigError
from lintrc.rules.base import BaseRule

logger = logging.getLogger(__name__)

# Names a plugin module may use to expose its rules, in lookup order.
_EXPORT_NAMES = ("lintrc_rules", "RULES")


class PluginLoadError(ConfigError):
    """Raised when a plugin spec cannot be turned into rule descriptors."""

    def __init__(self, spec: str, message: str) -> None:
        self.spec = spec
        super().__init__(f"Plugin {spec!r}: {message}")


def load_plugin_rules(plugin_specs: Iterable[str]) -> list[BaseRule]:
    """
    Load extra rule descriptors from `module` or `module:attr` specs.

    Every returned rule has a non-empty category and name. Conflicts with other
    rules are left to the catalog builder.
    """

    rules: list[BaseRule] = []
    for raw_spec in plugin_specs:
        spec = raw_spec.strip()
        if not spec:
            continue
        loaded = _rules_from_spec(spec)
        logger.debug("plugin %s provided %d rule(s)", spec, len(loaded))
        rules.extend(loaded)
    return rules


def _rules_from_spec(spec: str) -> list[BaseRule]:
    module_name, sep, attr = spec.partition(":")
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # noqa: BLE001
        raise PluginLoadError(spec, f"failed to import module {module_name!r}: {exc}") from exc

    export: Any = module
    if sep:
        if not hasattr(module, attr):
            raise PluginLoadError(spec, f"module {module_name!r} has no attribute {attr!r}")
        export = getattr(module, attr)

    rules = _collect_rules(spec, export)
    for rule in rules:
        if not rule.category or not rule.name:
            raise PluginLoadError(
                spec,
                f"{type(rule).__name__} needs a non-empty category and name, got {rule.category!r}/{rule.name!r}",
            )
    return rules


def _collect_rules(spec: str, export: Any) -> list[BaseRule]:
    if isinstance(export, ModuleType):
        for name in _EXPORT_NAMES:
            if hasattr(export, name):
                return _collect_rules(spec, getattr(export, name))
        raise PluginLoadError(spec, "module must define `lintrc_rules()` or `RULES`")

    if isinstance(export, list | tuple):
        rules: list[BaseRule] = []
        for item in export:
            if not isinstance(item, BaseRule):
                raise PluginLoadError(spec, f"expected BaseRule instances, got {type(item).__name__}")
            rules.append(item)
        return rules

    if callable(export):
        try:
            produced = export()
        except Exception as exc:  # noqa: BLE001
            raise PluginLoadError(spec, f"rule factory raised {type(exc).__name__}: {exc}") from exc
        if callable(produced) and not isinstance(produced, list | tuple):
            raise PluginLoadError(spec, "rule factory must return a list or tuple of rules")
        return _collect_rules(spec, produced)

    raise PluginLoadError(spec, f"unsupported export type {type(export).__name__}")
