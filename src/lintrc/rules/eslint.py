from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from lintrc.errors import ConfigError
from lintrc.rules.base import BaseRule, RuleMeta, option_bool, option_str_list, options_object

_CONSOLE_METHODS = {"log", "info", "warn", "error", "debug", "trace", "table", "dir", "time", "timeEnd"}


@dataclass(frozen=True, slots=True)
class NoConsole(BaseRule):
    meta = RuleMeta(
        category="eslint",
        name="no-console",
        description="Disallow the use of `console`.",
    )

    allow: tuple[str, ...] = ()

    def configure(self, config: Any | None) -> BaseRule:
        options = options_object(config)
        allow = option_str_list(options, "allow")
        unknown = sorted(set(allow) - _CONSOLE_METHODS)
        if unknown:
            raise ConfigError(f"`allow` contains unknown console method(s): {', '.join(unknown)}.")
        return replace(self, allow=allow)


@dataclass(frozen=True, slots=True)
class NoDebugger(BaseRule):
    meta = RuleMeta(
        category="eslint",
        name="no-debugger",
        description="Disallow the use of `debugger`.",
    )


@dataclass(frozen=True, slots=True)
class NoEmpty(BaseRule):
    meta = RuleMeta(
        category="eslint",
        name="no-empty",
        description="Disallow empty block statements.",
    )

    allow_empty_catch: bool = False

    def configure(self, config: Any | None) -> BaseRule:
        options = options_object(config)
        return replace(self, allow_empty_catch=option_bool(options, "allowEmptyCatch", False))


@dataclass(frozen=True, slots=True)
class Eqeqeq(BaseRule):
    meta = RuleMeta(
        category="eslint",
        name="eqeqeq",
        description="Require the use of `===` and `!==`.",
    )

    mode: str = "always"

    def configure(self, config: Any | None) -> BaseRule:
        if config is None:
            return self
        if config not in ("always", "smart"):
            raise ConfigError('mode must be "always" or "smart".')
        return replace(self, mode=config)


@dataclass(frozen=True, slots=True)
class NoUnusedVars(BaseRule):
    meta = RuleMeta(
        category="eslint",
        name="no-unused-vars",
        description="Disallow unused variables.",
    )


@dataclass(frozen=True, slots=True)
class MaxParams(BaseRule):
    meta = RuleMeta(
        category="eslint",
        name="max-params",
        description="Enforce a maximum number of parameters in function definitions.",
    )

    max: int = 3

    def configure(self, config: Any | None) -> BaseRule:
        # Both `2` and `{"max": 2}` are accepted.
        if config is None:
            return self
        value = config.get("max", self.max) if isinstance(config, dict) else config
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError("`max` must be a non-negative integer.")
        return replace(self, max=value)


def builtin_eslint_rules() -> list[BaseRule]:
    return [
        NoConsole(),
        NoDebugger(),
        NoEmpty(),
        Eqeqeq(),
        NoUnusedVars(),
        MaxParams(),
    ]
