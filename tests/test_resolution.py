from __future__ import annotations

import pytest
from helpers import FakeRule

from lintrc.config import parse_config_document
from lintrc.engine.resolution import is_rule_active, resolve_config, resolve_config_file, resolve_rules
from lintrc.engine.types import RuleKey, RuleOverride, Severity
from lintrc.errors import ConfigError, FileOpenError, RuleConfigError


def _resolve(catalog, document) -> list:
    config = parse_config_document(document)
    return resolve_rules(catalog, config.extends, config.overrides)


def _names(rules) -> list[str]:
    return [r.name for r in rules]


def test_worked_example(example_catalog) -> None:
    document = {
        "extends": ["eslint:recommended"],
        "rules": {"no-console": "error", "react/jsx-key": "off"},
    }
    resolved = _resolve(example_catalog, document)
    assert _names(resolved) == ["no-console", "no-unused-vars"]
    assert all(r.config is None for r in resolved)


def test_preset_rule_without_entry_is_included_with_default_config(example_catalog) -> None:
    resolved = _resolve(example_catalog, {"extends": ["plugin:react/recommended"]})
    assert resolved == [FakeRule("react", "jsx-key")]


def test_explicit_off_overrides_preset(example_catalog) -> None:
    resolved = _resolve(
        example_catalog,
        {"extends": ["plugin:react/recommended"], "rules": {"react/jsx-key": "off"}},
    )
    assert resolved == []


def test_explicit_entry_enables_rule_outside_presets(example_catalog) -> None:
    resolved = _resolve(example_catalog, {"rules": {"react/jsx-key": ["warn", {"opt": 1}]}})
    assert resolved == [FakeRule("react", "jsx-key", {"opt": 1})]


def test_explicit_entry_config_replaces_preset_default(example_catalog) -> None:
    resolved = _resolve(
        example_catalog,
        {"extends": ["eslint:recommended"], "rules": {"no-console": ["error", {"allow": ["warn"]}]}},
    )
    assert resolved == [
        FakeRule("eslint", "no-console", {"allow": ["warn"]}),
        FakeRule("eslint", "no-unused-vars"),
    ]


def test_unmentioned_rules_are_excluded(example_catalog) -> None:
    assert _resolve(example_catalog, {}) == []
    assert _resolve(example_catalog, {"extends": ["plugin:jest/recommended"]}) == []


def test_off_without_preset_stays_off(example_catalog) -> None:
    assert _resolve(example_catalog, {"rules": {"no-console": "off"}}) == []


def test_unknown_rules_are_ignored(example_catalog) -> None:
    resolved = _resolve(example_catalog, {"rules": {"no-such-rule": "error", "react/": "error"}})
    assert resolved == []


def test_output_sorted_by_name_regardless_of_order() -> None:
    catalog = (
        FakeRule("react", "zeta"),
        FakeRule("eslint", "beta"),
        FakeRule("jest", "alpha"),
    )
    document = {"rules": {"jest/alpha": "warn", "react/zeta": "error", "beta": "warn"}}
    forward = _resolve(catalog, document)
    backward = _resolve(tuple(reversed(catalog)), {"rules": dict(reversed(list(document["rules"].items())))})
    assert _names(forward) == ["alpha", "beta", "zeta"]
    assert forward == backward


def test_resolution_is_idempotent(example_catalog) -> None:
    document = {"extends": ["eslint:recommended"], "rules": {"react/jsx-key": ["error", {"a": [1, 2]}]}}
    assert _resolve(example_catalog, document) == _resolve(example_catalog, document)


def test_duplicate_catalog_entries_are_included_once() -> None:
    catalog = (FakeRule("eslint", "no-debugger"), FakeRule("eslint", "no-debugger"))
    assert _resolve(catalog, {"extends": ["eslint:recommended"]}) == [FakeRule("eslint", "no-debugger")]


def test_rule_config_failure_names_the_rule(example_catalog) -> None:
    with pytest.raises(RuleConfigError) as excinfo:
        _resolve(example_catalog, {"rules": {"react/jsx-key": ["error", "reject-me"]}})
    assert excinfo.value.rule == "react/jsx-key"
    assert "react/jsx-key" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, ConfigError)


def test_rejected_config_on_inactive_rule_is_not_read(example_catalog) -> None:
    assert _resolve(example_catalog, {"rules": {"react/jsx-key": ["off", "reject-me"]}}) == []


def test_is_rule_active_truth_table() -> None:
    rule = FakeRule("react", "jsx-key")
    key = RuleKey("react", "jsx-key")
    on = {key: RuleOverride(Severity.WARN)}
    off = {key: RuleOverride(Severity.OFF)}

    assert is_rule_active(rule, frozenset({"react"}), {}) is True
    assert is_rule_active(rule, frozenset({"react"}), off) is False
    assert is_rule_active(rule, frozenset({"react"}), on) is True
    assert is_rule_active(rule, frozenset(), {}) is False
    assert is_rule_active(rule, frozenset(), off) is False
    assert is_rule_active(rule, frozenset(), on) is True


def test_resolve_config_uses_builtin_catalog_by_default() -> None:
    config = parse_config_document({"extends": ["plugin:jest/recommended"]})
    assert _names(resolve_config(config)) == ["no-disabled-tests", "no-focused-tests"]


def test_resolve_config_file(write_config, example_catalog) -> None:
    path = write_config({"extends": ["eslint:recommended"], "rules": {"no-console": "off"}})
    assert _names(resolve_config_file(path, example_catalog)) == ["no-unused-vars"]


def test_resolve_config_file_propagates_load_errors(tmp_path) -> None:
    with pytest.raises(FileOpenError):
        resolve_config_file(tmp_path / "missing.json")
