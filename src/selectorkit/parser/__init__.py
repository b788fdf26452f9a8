"""Selector text parser built on Lark."""

from selectorkit.parser.errors import ParseError
from selectorkit.parser.transformer import parse_selector

__all__ = ["ParseError", "parse_selector"]
