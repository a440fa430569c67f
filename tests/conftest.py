from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from helpers import FakeRule

from lintrc.rules.registry import RuleCatalog


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    def _write(document: Any, name: str = ".eslintrc.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def example_catalog() -> RuleCatalog:
    return (
        FakeRule("eslint", "no-console"),
        FakeRule("eslint", "no-unused-vars"),
        FakeRule("react", "jsx-key"),
    )
