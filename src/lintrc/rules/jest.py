from __future__ import annotations

from dataclasses import dataclass

from lintrc.rules.base import BaseRule, RuleMeta


@dataclass(frozen=True, slots=True)
class NoDisabledTests(BaseRule):
    meta = RuleMeta(
        category="jest",
        name="no-disabled-tests",
        description="Disallow disabled tests (`xit`, `test.skip`, ...).",
    )


@dataclass(frozen=True, slots=True)
class NoFocusedTests(BaseRule):
    meta = RuleMeta(
        category="jest",
        name="no-focused-tests",
        description="Disallow focused tests (`fit`, `test.only`, ...).",
    )


def builtin_jest_rules() -> list[BaseRule]:
    return [NoDisabledTests(), NoFocusedTests()]
