from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from lintrc.rules.base import BaseRule, RuleMeta, option_bool, options_object


@dataclass(frozen=True, slots=True)
class JsxKey(BaseRule):
    meta = RuleMeta(
        category="react",
        name="jsx-key",
        description="Require a `key` prop for elements in arrays and iterators.",
    )


@dataclass(frozen=True, slots=True)
class JsxNoUselessFragment(BaseRule):
    meta = RuleMeta(
        category="react",
        name="jsx-no-useless-fragment",
        description="Disallow unnecessary fragments.",
    )

    allow_expressions: bool = False

    def configure(self, config: Any | None) -> BaseRule:
        options = options_object(config)
        return replace(self, allow_expressions=option_bool(options, "allowExpressions", False))


def builtin_react_rules() -> list[BaseRule]:
    return [JsxKey(), JsxNoUselessFragment()]
