"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.model.selector import FragmentKind


class SelectorError(ValueError):
    """Base class for every error raised while building a selector."""


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is added twice to one selector."""

    def __init__(self, kind: FragmentKind):
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector"
        )


class OrderViolationError(SelectorError):
    """Raised when a fragment is added after one of higher canonical rank."""

    def __init__(self, kind: FragmentKind, last_kind: FragmentKind):
        self.kind = kind
        self.last_kind = last_kind
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class InvalidCombinatorError(SelectorError):
    """Raised when a combinator token is not one of ' ', '+', '~', '>'."""

    def __init__(self, token: object):
        self.token = token
        super().__init__(f"Invalid combinator: {token!r}")
