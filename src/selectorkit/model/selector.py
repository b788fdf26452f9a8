"""Selector tree model: SimpleSelector and CombinedSelector nodes.

A simple selector is a compound like ``a#nav.item[href]:hover::before``; a
combined selector joins two nodes with a combinator (``' '``, ``+``, ``~``,
``>``).  Ordering and cardinality rules are checked when a fragment is added,
so serialization never has to validate anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from selectorkit.errors import DuplicateFragmentError, OrderViolationError

logger = logging.getLogger(__name__)


class FragmentKind(Enum):
    """Fragment kinds, declared in canonical order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        return _CANONICAL_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        return self in SINGLETON_KINDS

    @property
    def affixes(self) -> tuple[str, str]:
        """The (prefix, suffix) pair this kind wraps around its value."""
        return _DECORATIONS[self]

    def decorate(self, value: str) -> str:
        """Wrap *value* in this kind's CSS prefix/suffix."""
        prefix, suffix = self.affixes
        return f"{prefix}{value}{suffix}"


_CANONICAL_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

SINGLETON_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

_DECORATIONS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(Enum):
    """The four CSS combinators."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


COMBINATOR_TOKENS = frozenset(c.value for c in Combinator)


@dataclass
class SimpleSelector:
    """A compound selector built from typed fragments.

    ``fragments`` maps each kind present to its values in insertion order;
    ``last_kind`` is the kind of the most recently added fragment.
    """

    fragments: dict[FragmentKind, list[str]] = field(default_factory=dict)
    last_kind: FragmentKind | None = None

    # --- fragment adders ----------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Append a fragment of *kind*, or raise without touching the node."""
        self.check(kind)
        self.fragments.setdefault(kind, []).append(value)
        self.last_kind = kind
        return self

    def check(self, kind: FragmentKind) -> None:
        """Raise if a fragment of *kind* cannot be added next.

        A repeated singleton is reported as a duplicate even when it is also
        out of order.
        """
        if kind.is_singleton and kind in self.fragments:
            logger.debug("Rejected duplicate %s", kind.value)
            raise DuplicateFragmentError(kind)
        if self.last_kind is not None and kind.rank < self.last_kind.rank:
            logger.debug("Rejected %s after %s", kind.value, self.last_kind.value)
            raise OrderViolationError(kind, self.last_kind)

    # --- inspection ---------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.fragments

    def values(self, kind: FragmentKind) -> list[str]:
        """Return a copy of the values stored for *kind*."""
        return list(self.fragments.get(kind, ()))

    def iter_fragments(self):
        """Yield ``(kind, value)`` pairs in canonical order."""
        for kind in _CANONICAL_ORDER:
            for value in self.fragments.get(kind, ()):
                yield kind, value

    def combine(self, combinator: str | Combinator, other: SelectorNode) -> CombinedSelector:
        """Join this selector to *other*, as the module-level ``combine`` does."""
        from selectorkit.builder import combine

        return combine(self, combinator, other)

    def copy(self) -> SimpleSelector:
        """Return an independent snapshot of this selector."""
        return SimpleSelector(
            fragments={k: list(v) for k, v in self.fragments.items()},
            last_kind=self.last_kind,
        )

    # --- output -------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(kind.decorate(value) for kind, value in self.iter_fragments())

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token."""

    left: SelectorNode
    combinator: str
    right: SelectorNode

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def combine(self, combinator: str | Combinator, other: SelectorNode) -> CombinedSelector:
        from selectorkit.builder import combine

        return combine(self, combinator, other)

    def __str__(self) -> str:
        return self.stringify()


SelectorNode = Union[SimpleSelector, CombinedSelector]


def iter_simple(node: SelectorNode):
    """Yield every SimpleSelector in *node*, left to right."""
    if isinstance(node, CombinedSelector):
        yield from iter_simple(node.left)
        yield from iter_simple(node.right)
    else:
        yield node
