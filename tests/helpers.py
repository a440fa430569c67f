from __future__ import annotations

from typing import Any

from lintrc.errors import ConfigError
from lintrc.rules.base import BaseRule, RuleMeta


class FakeRule(BaseRule):
    """Catalog entry with a per-instance key, for synthetic catalogs."""

    def __init__(self, category: str, name: str, config: Any | None = None) -> None:
        self.meta = RuleMeta(category=category, name=name, description="fake")
        self.config = config

    def configure(self, config: Any | None) -> BaseRule:
        if config == "reject-me":
            raise ConfigError("fake rule rejected its options.")
        return FakeRule(self.category, self.name, config)

    def options(self) -> dict[str, Any]:
        return {"config": self.config}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FakeRule):
            return NotImplemented
        return (self.key, self.config) == (other.key, other.config)

    def __repr__(self) -> str:
        return f"FakeRule({self.category!r}, {self.name!r}, {self.config!r})"
