from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_CATEGORY = "eslint"


class Severity(Enum):
    OFF = "off"
    WARN = "warn"
    ERROR = "error"

    def is_enabled(self) -> bool:
        return self is not Severity.OFF


@dataclass(frozen=True, slots=True)
class RuleKey:
    category: str
    name: str

    def __str__(self) -> str:
        return f"{self.category}/{self.name}"


@dataclass(frozen=True, slots=True)
class RuleOverride:
    severity: Severity
    config: Any | None = None  # second element of the `[severity, config]` form
