"""Tests for the selector model: fragment kinds, nodes, and diagnostics."""

from selectorkit.model import (
    COMBINATOR_TOKENS,
    Combinator,
    CombinedSelector,
    Diagnostic,
    FragmentKind,
    Severity,
    SimpleSelector,
    iter_simple,
)


class TestFragmentKind:
    def test_canonical_ranks(self):
        assert [k.rank for k in FragmentKind] == [0, 1, 2, 3, 4, 5]
        assert FragmentKind.ELEMENT.rank < FragmentKind.PSEUDO_ELEMENT.rank

    def test_singletons(self):
        singles = {k for k in FragmentKind if k.is_singleton}
        assert singles == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }

    def test_decorations(self):
        assert FragmentKind.ELEMENT.decorate("p") == "p"
        assert FragmentKind.ID.decorate("x") == "#x"
        assert FragmentKind.CLASS.decorate("x") == ".x"
        assert FragmentKind.ATTRIBUTE.decorate("x=1") == "[x=1]"
        assert FragmentKind.PSEUDO_CLASS.decorate("x") == ":x"
        assert FragmentKind.PSEUDO_ELEMENT.decorate("x") == "::x"

    def test_values_use_glossary_names(self):
        assert FragmentKind("pseudoClass") is FragmentKind.PSEUDO_CLASS
        assert FragmentKind("attribute") is FragmentKind.ATTRIBUTE


class TestCombinator:
    def test_tokens(self):
        assert COMBINATOR_TOKENS == {" ", "+", "~", ">"}
        assert Combinator(">") is Combinator.CHILD


class TestSimpleSelector:
    def test_empty(self):
        node = SimpleSelector()
        assert node.is_empty
        assert node.last_kind is None
        assert node.stringify() == ""

    def test_last_kind_tracks_latest(self):
        node = SimpleSelector().element("a").class_("b")
        assert node.last_kind is FragmentKind.CLASS

    def test_values_returns_copy(self):
        node = SimpleSelector().class_("a")
        node.values(FragmentKind.CLASS).append("b")
        assert node.values(FragmentKind.CLASS) == ["a"]
        assert node.values(FragmentKind.ID) == []

    def test_iter_fragments_canonical_order(self):
        node = SimpleSelector().element("a").class_("x").class_("y").pseudo_class("hover")
        assert list(node.iter_fragments()) == [
            (FragmentKind.ELEMENT, "a"),
            (FragmentKind.CLASS, "x"),
            (FragmentKind.CLASS, "y"),
            (FragmentKind.PSEUDO_CLASS, "hover"),
        ]

    def test_copy_is_independent(self):
        node = SimpleSelector().element("a").class_("x")
        clone = node.copy()
        clone.class_("y")
        assert node.stringify() == "a.x"
        assert clone.stringify() == "a.x.y"
        assert clone.last_kind is FragmentKind.CLASS


class TestIterSimple:
    def test_left_to_right(self):
        a, b, c = (SimpleSelector().element(n) for n in "abc")
        tree = CombinedSelector(a, "+", CombinedSelector(b, ">", c))
        assert list(iter_simple(tree)) == [a, b, c]

    def test_single_node(self):
        a = SimpleSelector().element("a")
        assert list(iter_simple(a)) == [a]


class TestDiagnostic:
    def test_str_with_fragment(self):
        d = Diagnostic(rule="r", severity=Severity.WARNING, message="bad", fragment="#x")
        assert str(d) == "WARNING [#x]: bad"
        assert d.is_warning
        assert not d.is_error

    def test_str_without_fragment(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="empty")
        assert str(d) == "ERROR: empty"
        assert d.is_error
