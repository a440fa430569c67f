from __future__ import annotations

from abc import ABC
from dataclasses import asdict, dataclass, is_dataclass
from typing import Any

from lintrc.engine.types import RuleKey
from lintrc.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RuleMeta:
    category: str
    name: str
    description: str


class BaseRule(ABC):
    """
    A rule descriptor in the catalog.

    Descriptors are immutable; `configure()` returns a new instance carrying the
    rule's own options.
    """

    meta: RuleMeta

    @property
    def category(self) -> str:
        return self.meta.category

    @property
    def name(self) -> str:
        return self.meta.name

    @property
    def key(self) -> RuleKey:
        return RuleKey(self.meta.category, self.meta.name)

    def configure(self, config: Any | None) -> BaseRule:
        if config is None or config == {}:
            return self
        raise ConfigError("this rule takes no options.")

    def options(self) -> dict[str, Any]:
        if is_dataclass(self):
            return asdict(self)
        return {}


def options_object(config: Any | None) -> dict[str, Any]:
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError("options must be an object.")
    return config


def option_bool(options: dict[str, Any], key: str, default: bool) -> bool:
    value = options.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"`{key}` must be a boolean.")
    return value


def option_str_list(options: dict[str, Any], key: str) -> tuple[str, ...]:
    value = options.get(key, [])
    if not isinstance(value, list) or any(not isinstance(v, str) for v in value):
        raise ConfigError(f"`{key}` must be a list of strings.")
    return tuple(value)
