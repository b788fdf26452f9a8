"""Lint rules for selector trees.

Each rule is a function taking a selector node and returning a list of
Diagnostic objects describing any issues found.  The builder already rejects
illegal orderings and duplicates; these rules catch selectors that build fine
but probably do not say what the author meant.
"""

from __future__ import annotations

import re

from selectorkit.model.diagnostic import Diagnostic, Severity
from selectorkit.model.selector import (
    COMBINATOR_TOKENS,
    CombinedSelector,
    FragmentKind,
    SelectorNode,
    iter_simple,
)

# Decorations a caller might paste into a value by mistake, e.g. id("#main").
_DOUBLED_PREFIXES: dict[FragmentKind, tuple[str, ...]] = {
    FragmentKind.ID: ("#",),
    FragmentKind.CLASS: (".",),
    FragmentKind.ATTRIBUTE: ("[",),
    FragmentKind.PSEUDO_CLASS: (":",),
    FragmentKind.PSEUDO_ELEMENT: (":",),
}

# Pseudo-class arguments may legitimately contain spaces: nth-child(2n + 1).
_PSEUDO_ARG_RE = re.compile(r"\(.*\)\s*$")
_WS_RE = re.compile(r"\s")


def _iter_combined(node: SelectorNode):
    if isinstance(node, CombinedSelector):
        yield node
        yield from _iter_combined(node.left)
        yield from _iter_combined(node.right)


# ---------------------------------------------------------------------------
# ERROR severity
# ---------------------------------------------------------------------------


def check_empty_compound(node: SelectorNode) -> list[Diagnostic]:
    """Every compound must hold at least one fragment."""
    diagnostics: list[Diagnostic] = []
    for simple in iter_simple(node):
        if simple.is_empty:
            diagnostics.append(
                Diagnostic(
                    rule="empty_compound",
                    severity=Severity.ERROR,
                    message="Selector has an empty compound",
                    fix="Add at least one fragment, or use '*' as the element",
                )
            )
    return diagnostics


def check_combinator_known(node: SelectorNode) -> list[Diagnostic]:
    """Combinators must be one of ' ', '+', '~', '>'."""
    diagnostics: list[Diagnostic] = []
    for combined in _iter_combined(node):
        if combined.combinator not in COMBINATOR_TOKENS:
            diagnostics.append(
                Diagnostic(
                    rule="combinator_known",
                    severity=Severity.ERROR,
                    message=f"Unknown combinator {combined.combinator!r}",
                    fragment=combined.combinator,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# WARNING severity
# ---------------------------------------------------------------------------


def check_decorated_values(node: SelectorNode) -> list[Diagnostic]:
    """Values should not carry their own '#', '.', '[' or ':' decoration."""
    diagnostics: list[Diagnostic] = []
    for simple in iter_simple(node):
        for kind, value in simple.iter_fragments():
            prefixes = _DOUBLED_PREFIXES.get(kind, ())
            if value.startswith(prefixes):
                rendered = kind.decorate(value)
                bare = value.lstrip("".join(prefixes))
                suffix = kind.affixes[1]
                if suffix:
                    bare = bare.rstrip(suffix)
                diagnostics.append(
                    Diagnostic(
                        rule="decorated_values",
                        severity=Severity.WARNING,
                        message=f"{kind.value} value {value!r} renders as {rendered!r}",
                        fragment=rendered,
                        fix=f"Pass the bare value {bare!r}",
                    )
                )
    return diagnostics


def check_whitespace_in_values(node: SelectorNode) -> list[Diagnostic]:
    """Element, id, class and pseudo-element values should not contain whitespace."""
    diagnostics: list[Diagnostic] = []
    for simple in iter_simple(node):
        for kind, value in simple.iter_fragments():
            if kind is FragmentKind.ATTRIBUTE:
                continue
            text = value
            if kind is FragmentKind.PSEUDO_CLASS:
                text = _PSEUDO_ARG_RE.sub("", value)
            if _WS_RE.search(text):
                diagnostics.append(
                    Diagnostic(
                        rule="whitespace_in_values",
                        severity=Severity.WARNING,
                        message=f"{kind.value} value {value!r} contains whitespace",
                        fragment=kind.decorate(value),
                    )
                )
    return diagnostics


ALL_RULES = [
    check_empty_compound,
    check_combinator_known,
    check_decorated_values,
    check_whitespace_in_values,
]
