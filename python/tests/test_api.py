"""
Tests for the module-level API backed by the default inflector.
"""

import re

import pytest

import countnoun
from countnoun import Inflector


class TestModuleFunctions:
    def test_queries(self, default_inflector):
        assert countnoun.plural("Goose") == "Geese"
        assert countnoun.singular("peaches") == "peach"
        assert countnoun.is_plural("tests") is True
        assert countnoun.is_singular("tests") is False

    def test_pluralize(self, default_inflector):
        assert countnoun.pluralize("peach", 1) == "peach"
        assert countnoun.pluralize("peach", 2) == "peaches"
        assert countnoun.pluralize("peach", 2, True) == "2 peaches"

    def test_registration_reaches_default_inflector(self, default_inflector):
        countnoun.add_plural_rule(re.compile(r"gex$", re.IGNORECASE), "gexii")
        countnoun.add_singular_rule(re.compile(r"gexii$", re.IGNORECASE), "gex")
        countnoun.add_irregular_rule("octopus", "octopodes")
        countnoun.add_uncountable_rule("feedback")

        assert default_inflector.plural("regex") == "regexii"
        assert countnoun.singular("regexii") == "regex"
        assert countnoun.plural("octopus") == "octopodes"
        assert countnoun.plural("feedback") == "feedback"

    def test_invalid_rule_raises(self, default_inflector):
        with pytest.raises(countnoun.InvalidRuleError):
            countnoun.add_plural_rule("(oops", "x")


class TestDefaultInflector:
    def test_built_once(self, monkeypatch):
        monkeypatch.delenv("COUNTNOUN_RULES_FILE", raising=False)
        countnoun.set_default_inflector(None)
        try:
            first = countnoun.get_default_inflector()
            assert countnoun.get_default_inflector() is first
            assert first.plural("goose") == "geese"
        finally:
            countnoun.set_default_inflector(None)

    def test_replaceable(self):
        custom = Inflector(seed=False)
        countnoun.set_default_inflector(custom)
        try:
            assert countnoun.get_default_inflector() is custom
            assert countnoun.plural("goose") == "goose"
        finally:
            countnoun.set_default_inflector(None)

    def test_rules_file_applied(self, tmp_path, monkeypatch):
        path = tmp_path / "rules.yaml"
        path.write_text("irregular:\n  - [octopus, octopodes]\n", encoding="utf-8")
        monkeypatch.setenv("COUNTNOUN_RULES_FILE", str(path))
        countnoun.set_default_inflector(None)
        try:
            assert countnoun.plural("octopus") == "octopodes"
        finally:
            countnoun.set_default_inflector(None)
