from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType

from lintrc.engine.types import RuleKey
from lintrc.errors import CatalogError
from lintrc.rules.base import BaseRule
from lintrc.rules.eslint import builtin_eslint_rules
from lintrc.rules.jest import builtin_jest_rules
from lintrc.rules.react import builtin_react_rules
from lintrc.rules.typescript import builtin_typescript_rules
from lintrc.rules.unicorn import builtin_unicorn_rules

RuleCatalog = tuple[BaseRule, ...]


@lru_cache(maxsize=1)
def builtin_rules() -> RuleCatalog:
    rules: list[BaseRule] = []
    rules.extend(builtin_eslint_rules())
    rules.extend(builtin_react_rules())
    rules.extend(builtin_typescript_rules())
    rules.extend(builtin_jest_rules())
    rules.extend(builtin_unicorn_rules())
    return _checked_catalog(rules)


def build_catalog(extra_rules: Iterable[BaseRule] = ()) -> RuleCatalog:
    """
    Combine the built-in rules with extra (plugin) rules.

    The result is a fresh, immutable catalog; nothing is registered globally.
    """

    extra = list(extra_rules)
    if not extra:
        return builtin_rules()
    return _checked_catalog([*builtin_rules(), *extra])


def _checked_catalog(rules: Iterable[BaseRule]) -> RuleCatalog:
    by_key: dict[RuleKey, BaseRule] = {}
    for rule in rules:
        key = rule.key
        if not key.category or not key.name:
            raise CatalogError(f"Rule key must have a category and a name: {key.category!r}/{key.name!r}")
        if key in by_key:
            raise CatalogError(f"Duplicate rule: {key}")
        by_key[key] = rule

    # Stable order by (category, name)
    return tuple(by_key[k] for k in sorted(by_key, key=lambda k: (k.category, k.name)))


def catalog_index(catalog: RuleCatalog) -> Mapping[RuleKey, BaseRule]:
    return MappingProxyType({rule.key: rule for rule in catalog})
