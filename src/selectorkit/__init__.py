"""Selectorkit: a fluent builder for CSS selectors."""

__version__ = "0.1.0"

from selectorkit.builder import (  # noqa: E402
    SelectorBuilder,
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from selectorkit.config import BuilderConfig  # noqa: E402
from selectorkit.errors import (  # noqa: E402
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from selectorkit.model.selector import (  # noqa: E402
    Combinator,
    CombinedSelector,
    FragmentKind,
    SelectorNode,
    SimpleSelector,
)

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "BuilderConfig",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    # model
    "FragmentKind",
    "Combinator",
    "SimpleSelector",
    "CombinedSelector",
    "SelectorNode",
    # errors
    "SelectorError",
    "DuplicateFragmentError",
    "OrderViolationError",
    "InvalidCombinatorError",
]
