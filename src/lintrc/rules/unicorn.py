from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from lintrc.errors import ConfigError
from lintrc.rules.base import BaseRule, RuleMeta, options_object

_CASES = ("camelCase", "kebabCase", "pascalCase", "snakeCase")


@dataclass(frozen=True, slots=True)
class FilenameCase(BaseRule):
    meta = RuleMeta(
        category="unicorn",
        name="filename-case",
        description="Enforce a case style for filenames.",
    )

    case: str = "kebabCase"

    def configure(self, config: Any | None) -> BaseRule:
        options = options_object(config)
        case = options.get("case", "kebabCase")
        if case not in _CASES:
            raise ConfigError(f"`case` must be one of: {', '.join(_CASES)}.")
        return replace(self, case=case)


def builtin_unicorn_rules() -> list[BaseRule]:
    return [FilenameCase()]
