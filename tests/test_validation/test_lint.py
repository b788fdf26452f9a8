"""Tests for selector lint rules and the linter."""

import pytest

from selectorkit import BuilderConfig, SelectorBuilder, SimpleSelector, combine, element
from selectorkit.model.diagnostic import Diagnostic, Severity
from selectorkit.validation import LintError, lint, lint_or_raise
from selectorkit.validation.rules import (
    check_combinator_known,
    check_decorated_values,
    check_empty_compound,
    check_whitespace_in_values,
)


# ---------------------------------------------------------------------------
# check_empty_compound
# ---------------------------------------------------------------------------


class TestCheckEmptyCompound:
    def test_empty_simple(self):
        diags = check_empty_compound(SimpleSelector())
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR

    def test_empty_side_of_combined(self):
        node = combine(element("a"), "+", SimpleSelector())
        assert len(check_empty_compound(node)) == 1

    def test_non_empty(self):
        assert check_empty_compound(element("a")) == []


# ---------------------------------------------------------------------------
# check_combinator_known
# ---------------------------------------------------------------------------


class TestCheckCombinatorKnown:
    def test_known(self):
        assert check_combinator_known(combine(element("a"), "~", element("b"))) == []

    def test_unknown_nested(self):
        lenient = SelectorBuilder(BuilderConfig(strict_combinators=False))
        node = lenient.combine(
            element("a"), ">", lenient.combine(element("b"), "||", element("c"))
        )
        diags = check_combinator_known(node)
        assert len(diags) == 1
        assert diags[0].fragment == "||"
        assert diags[0].is_error


# ---------------------------------------------------------------------------
# check_decorated_values
# ---------------------------------------------------------------------------


class TestCheckDecoratedValues:
    @pytest.mark.parametrize(
        "node, rendered",
        [
            (SimpleSelector().id("#main"), "##main"),
            (SimpleSelector().class_(".x"), "..x"),
            (SimpleSelector().attr("[href]"), "[[href]]"),
            (SimpleSelector().pseudo_class(":hover"), "::hover"),
            (SimpleSelector().pseudo_element("::before"), "::::before"),
        ],
    )
    def test_doubled(self, node, rendered):
        diags = check_decorated_values(node)
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert diags[0].fragment == rendered

    def test_fix_suggests_bare_value(self):
        diags = check_decorated_values(SimpleSelector().id("#main"))
        assert diags[0].fix == "Pass the bare value 'main'"

    def test_fix_strips_attribute_brackets(self):
        diags = check_decorated_values(SimpleSelector().attr("[href]"))
        assert diags[0].fix == "Pass the bare value 'href'"

    def test_clean(self):
        node = element("a").id("x").class_("y").attr("href").pseudo_class("hover")
        assert check_decorated_values(node) == []


# ---------------------------------------------------------------------------
# check_whitespace_in_values
# ---------------------------------------------------------------------------


class TestCheckWhitespaceInValues:
    def test_class_with_space(self):
        diags = check_whitespace_in_values(element("a").class_("btn primary"))
        assert len(diags) == 1
        assert diags[0].fragment == ".btn primary"

    def test_attribute_allowed(self):
        assert check_whitespace_in_values(element("a").attr('title="a b"')) == []

    def test_pseudo_argument_allowed(self):
        node = element("li").pseudo_class("nth-child(2n + 1)")
        assert check_whitespace_in_values(node) == []

    def test_pseudo_name_with_space(self):
        diags = check_whitespace_in_values(element("li").pseudo_class("first child"))
        assert len(diags) == 1


# ---------------------------------------------------------------------------
# lint / lint_or_raise
# ---------------------------------------------------------------------------


class TestLint:
    def test_clean_selector(self):
        node = combine(element("ul").class_("menu"), ">", element("li"))
        assert lint(node) == []

    def test_collects_all_rules(self):
        node = combine(SimpleSelector(), "+", element("a").class_(".x"))
        rules = {d.rule for d in lint(node)}
        assert rules == {"empty_compound", "decorated_values"}

    def test_extra_rules(self):
        def no_div(node):
            return [Diagnostic(rule="no_div", severity=Severity.INFO, message="div")]

        diags = lint(element("div"), extra_rules=[no_div])
        assert [d.rule for d in diags] == ["no_div"]

    def test_or_raise_with_errors(self):
        with pytest.raises(LintError) as excinfo:
            lint_or_raise(SimpleSelector())
        assert len(excinfo.value.diagnostics) == 1
        assert "1 lint error(s)" in str(excinfo.value)

    def test_or_raise_returns_warnings(self):
        diags = lint_or_raise(element("a").class_(".x"))
        assert len(diags) == 1
        assert diags[0].is_warning
