"""Selector builder facade.

Each entry point returns a fresh :class:`SimpleSelector` seeded with one
fragment; further fragments are chained on the returned node::

    id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    combine(element("div").id("main"), "+", element("table").id("data"))
    # div#main + table#data
"""

from __future__ import annotations

import logging

from selectorkit.config import BuilderConfig
from selectorkit.errors import InvalidCombinatorError
from selectorkit.model.selector import (
    Combinator,
    CombinedSelector,
    FragmentKind,
    SelectorNode,
    SimpleSelector,
)

__all__ = [
    "SelectorBuilder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Stateless factory for selector nodes, parameterised by a BuilderConfig."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.fragment(FragmentKind.PSEUDO_ELEMENT, value)

    def fragment(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Return a new selector holding a single fragment of *kind*."""
        return SimpleSelector().add(kind, value)

    def combine(
        self,
        left: SelectorNode,
        combinator: str | Combinator,
        right: SelectorNode,
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator*.

        The sides are held by reference: later changes to a simple side show
        up when the combined selector is stringified again.
        """
        token = self._combinator_token(combinator)
        logger.debug("Combining selectors with %r", token)
        return CombinedSelector(left=left, combinator=token, right=right)

    def _combinator_token(self, combinator: str | Combinator) -> str:
        if isinstance(combinator, Combinator):
            return combinator.value
        if not self.config.strict_combinators:
            return str(combinator)
        try:
            return Combinator(combinator).value
        except ValueError:
            raise InvalidCombinatorError(combinator) from None


_default = SelectorBuilder()


def element(value: str) -> SimpleSelector:
    return _default.element(value)


def id(value: str) -> SimpleSelector:  # noqa: A001
    return _default.id(value)


def class_(value: str) -> SimpleSelector:
    return _default.class_(value)


def attr(value: str) -> SimpleSelector:
    return _default.attr(value)


def pseudo_class(value: str) -> SimpleSelector:
    return _default.pseudo_class(value)


def pseudo_element(value: str) -> SimpleSelector:
    return _default.pseudo_element(value)


def combine(
    left: SelectorNode, combinator: str | Combinator, right: SelectorNode
) -> CombinedSelector:
    return _default.combine(left, combinator, right)
