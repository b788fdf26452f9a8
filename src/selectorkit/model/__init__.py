"""Selectorkit model layer -- public type re-exports."""

from selectorkit.model.diagnostic import Diagnostic, Severity
from selectorkit.model.selector import (
    COMBINATOR_TOKENS,
    Combinator,
    CombinedSelector,
    FragmentKind,
    SelectorNode,
    SimpleSelector,
    iter_simple,
)

__all__ = [
    # selector
    "FragmentKind",
    "Combinator",
    "COMBINATOR_TOKENS",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    "iter_simple",
    # diagnostic
    "Severity",
    "Diagnostic",
]
