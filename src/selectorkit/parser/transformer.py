"""Lark Transformer that converts a selector parse tree into selector nodes."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from selectorkit.builder import SelectorBuilder
from selectorkit.errors import SelectorError
from selectorkit.model.selector import FragmentKind, SelectorNode, SimpleSelector
from selectorkit.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

logger = logging.getLogger(__name__)


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into SimpleSelector / CombinedSelector nodes."""

    def __init__(self, builder: SelectorBuilder | None = None) -> None:
        super().__init__()
        self.builder = builder or SelectorBuilder()

    # ---- fragments ----

    def element(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ELEMENT, str(items[0]))

    def id(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ID, str(items[0]))

    def class_(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.CLASS, str(items[0]))

    def attribute(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.ATTRIBUTE, str(items[0]))

    def pseudo_class(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.PSEUDO_CLASS, str(items[0]))

    def pseudo_element(self, items: list[Token]) -> tuple[FragmentKind, str]:
        return (FragmentKind.PSEUDO_ELEMENT, str(items[0]))

    # ---- structural ----

    def compound(self, items: list[tuple[FragmentKind, str]]) -> SimpleSelector:
        node = SimpleSelector()
        for kind, value in items:
            node.add(kind, value)
        return node

    def selector(self, items: list[object]) -> SelectorNode:
        # Items alternate: compound, COMBINATOR, compound, ...
        compounds: list[SelectorNode] = items[0::2]  # type: ignore[assignment]
        tokens = [str(t).strip() or " " for t in items[1::2]]

        # Fold from the right: a + b ~ c -> combine(a, "+", combine(b, "~", c))
        node = compounds[-1]
        for left, token in zip(reversed(compounds[:-1]), reversed(tokens)):
            node = self.builder.combine(left, token, node)
        return node

    def start(self, items: list[object]) -> SelectorNode:
        return items[0]  # type: ignore[return-value]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )


def parse_selector(source: str, builder: SelectorBuilder | None = None) -> SelectorNode:
    """Parse CSS selector text into a selector tree.

    Ordering and duplicate violations inside a compound raise the builder's
    errors; malformed text raises :class:`ParseError`.
    """
    text = source.strip()
    if not text:
        raise ParseError("Empty selector")
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        logger.debug("Failed to parse %r at line=%s column=%s", text, line, column)
        raise ParseError(str(e), line=line, column=column) from e

    transformer = SelectorTransformer(builder)
    try:
        return transformer.transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, SelectorError):
            raise e.orig_exc from None
        raise
