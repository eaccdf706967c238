"""Attribute predicates used by the extraction rules.

All helpers accept either node variant; text nodes never match.
"""

from __future__ import annotations

from emojisheet.common.exceptions import MissingAttribute
from emojisheet.common.nodes import ElementNode, NodeKind, TextNode


def is_element(node: TextNode | ElementNode, tag: str | None = None) -> bool:
    """Check that ``node`` is an element, optionally with the given tag."""
    if node.kind is not NodeKind.ELEMENT:
        return False
    return tag is None or node.tag == tag  # type: ignore[union-attr]


def has_attribute(node: TextNode | ElementNode, key: str, value: str) -> bool:
    """Check whether ``node`` carries the attribute ``key=value``."""
    if not is_element(node):
        return False
    return node.get(key) == value  # type: ignore[union-attr]


def has_class(node: TextNode | ElementNode, wanted: str) -> bool:
    """Check whether ``node``'s class attribute contains the token ``wanted``.

    The class attribute is split on single spaces, so runs of whitespace
    produce empty tokens rather than being collapsed.

    Args:
        node: Node to test.
        wanted: The class token to look for.

    Returns:
        True if the element has the token in its class list.
    """
    if not is_element(node):
        return False
    classes = node.get("class")  # type: ignore[union-attr]
    if classes is None:
        return False
    return wanted in classes.split(" ")


def require_attribute(
    node: ElementNode, name: str, source_url: str = ""
) -> str:
    """Return the value of a required attribute.

    Raises:
        MissingAttribute: If the attribute is absent.
    """
    value = node.get(name)
    if value is None:
        raise MissingAttribute(
            attribute=name,
            element=node.describe(),
            source_url=source_url,
            context={"line": node.sourceline},
        )
    return value
