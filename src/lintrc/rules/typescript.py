from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from lintrc.rules.base import BaseRule, RuleMeta, option_bool, options_object


@dataclass(frozen=True, slots=True)
class NoExplicitAny(BaseRule):
    meta = RuleMeta(
        category="typescript",
        name="no-explicit-any",
        description="Disallow the `any` type.",
    )

    fix_to_unknown: bool = False
    ignore_rest_args: bool = False

    def configure(self, config: Any | None) -> BaseRule:
        options = options_object(config)
        return replace(
            self,
            fix_to_unknown=option_bool(options, "fixToUnknown", False),
            ignore_rest_args=option_bool(options, "ignoreRestArgs", False),
        )


@dataclass(frozen=True, slots=True)
class NoEmptyInterface(BaseRule):
    meta = RuleMeta(
        category="typescript",
        name="no-empty-interface",
        description="Disallow declaring empty interfaces.",
    )

    allow_single_extends: bool = False

    def configure(self, config: Any | None) -> BaseRule:
        options = options_object(config)
        return replace(self, allow_single_extends=option_bool(options, "allowSingleExtends", False))


def builtin_typescript_rules() -> list[BaseRule]:
    return [NoExplicitAny(), NoEmptyInterface()]
