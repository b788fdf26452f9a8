"""Convert selector trees to and from plain dicts (JSON-ready)."""

from __future__ import annotations

from typing import Any

from selectorkit.builder import SelectorBuilder
from selectorkit.errors import SelectorError
from selectorkit.model.selector import (
    CombinedSelector,
    FragmentKind,
    SelectorNode,
    SimpleSelector,
)

__all__ = ["to_dict", "from_dict"]


def to_dict(node: SelectorNode) -> dict[str, Any]:
    """Return a dict describing *node*; fragments are listed in canonical order."""
    if isinstance(node, CombinedSelector):
        return {
            "type": "combined",
            "left": to_dict(node.left),
            "combinator": node.combinator,
            "right": to_dict(node.right),
        }
    return {
        "type": "simple",
        "fragments": [
            {"kind": kind.value, "value": value}
            for kind, value in node.iter_fragments()
        ],
    }


def from_dict(
    data: dict[str, Any], builder: SelectorBuilder | None = None
) -> SelectorNode:
    """Rebuild a selector tree from :func:`to_dict` output.

    Fragments go through the builder, so ordering, duplicate and combinator
    rules apply exactly as they do to hand-built selectors.
    """
    builder = builder or SelectorBuilder()
    if not isinstance(data, dict):
        raise SelectorError(f"Expected an object, got {type(data).__name__}")

    node_type = data.get("type")
    try:
        if node_type == "simple":
            return _simple_from_dict(data["fragments"])
        if node_type == "combined":
            return builder.combine(
                from_dict(data["left"], builder),
                data["combinator"],
                from_dict(data["right"], builder),
            )
    except KeyError as e:
        raise SelectorError(f"Missing key {e.args[0]!r} in {node_type} selector") from None
    except TypeError as e:
        raise SelectorError(f"Malformed {node_type} selector: {e}") from None
    raise SelectorError(f"Unknown selector type: {node_type!r}")


def _simple_from_dict(fragments: list[dict[str, Any]]) -> SimpleSelector:
    if not isinstance(fragments, list):
        raise SelectorError(
            f"Expected a list of fragments, got {type(fragments).__name__}"
        )
    node = SimpleSelector()
    for fragment in fragments:
        if not isinstance(fragment, dict):
            raise SelectorError(
                f"Expected a fragment object, got {type(fragment).__name__}"
            )
        try:
            kind = FragmentKind(fragment["kind"])
        except ValueError:
            raise SelectorError(f"Unknown fragment kind: {fragment['kind']!r}") from None
        node.add(kind, str(fragment["value"]))
    return node
