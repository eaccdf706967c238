"""Read-only node model over lxml documents.

lxml stores text as ``.text``/``.tail`` strings hanging off elements. The
extractor needs to reason about text and element nodes as siblings of each
other (the first child of a heading may be text, the first *element* child
of a list item may follow whitespace), so this module exposes a document as
a tree with exactly two node variants:

- ``TextNode`` for character data
- ``ElementNode`` for tags, wrapping an lxml ``HtmlElement``

Comments and processing instructions are not surfaced as nodes; their tail
text still is.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from lxml import etree
from lxml.html import HtmlElement, HTMLParser, document_fromstring

from emojisheet.common.exceptions import DocumentParseError


class NodeKind(Enum):
    ELEMENT = "element"
    TEXT = "text"


@dataclass(frozen=True)
class TextNode:
    """A run of character data.

    Attributes:
        data: The raw text, untrimmed.
    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    data: str


def _is_tag(element: HtmlElement) -> bool:
    # Comments, PIs and entities carry a callable as their tag.
    return isinstance(element.tag, str)


class ElementNode:
    """An element node backed by an lxml ``HtmlElement``.

    Instances are cheap views; two nodes wrapping the same lxml element
    compare equal.
    """

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT

    def __init__(self, element: HtmlElement) -> None:
        self._element = element

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementNode):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        return f"ElementNode({self.describe()})"

    @property
    def tag(self) -> str:
        """Lowercase tag name (e.g. ``"div"``)."""
        return self._element.tag.lower()

    @property
    def sourceline(self) -> int | None:
        """Line in the source document where the element starts."""
        return self._element.sourceline

    def get(self, name: str) -> str | None:
        """Return an attribute value, or None if the attribute is absent."""
        return self._element.get(name)

    def children(self) -> list[TextNode | ElementNode]:
        """Return child nodes in document order, text and elements interleaved.

        Returns:
            List of TextNode and ElementNode children.
        """
        nodes: list[TextNode | ElementNode] = []
        if self._element.text:
            nodes.append(TextNode(self._element.text))
        for child in self._element:
            if _is_tag(child):
                nodes.append(ElementNode(child))
            if child.tail:
                nodes.append(TextNode(child.tail))
        return nodes

    def element_children(self) -> Iterator[ElementNode]:
        """Yield only the element children, in document order."""
        for child in self._element:
            if _is_tag(child):
                yield ElementNode(child)

    def first_child(self) -> TextNode | ElementNode | None:
        """Return the first child node of either variant, or None."""
        children = self.children()
        return children[0] if children else None

    def first_element_child(self) -> ElementNode | None:
        """Return the first element child, skipping text, or None."""
        return next(self.element_children(), None)

    def preceding_siblings(self) -> Iterator[TextNode | ElementNode]:
        """Yield the nodes before this one under the same parent, nearest first.

        The text between two elements belongs to the earlier element's tail in
        lxml, so each sibling's tail is yielded before the sibling itself.
        """
        for sibling in self._element.itersiblings(preceding=True):
            if sibling.tail:
                yield TextNode(sibling.tail)
            if _is_tag(sibling):
                yield ElementNode(sibling)

        parent = self._element.getparent()
        if parent is not None and parent.text:
            yield TextNode(parent.text)

    def describe(self) -> str:
        """Short start-tag rendering used in error messages.

        Returns:
            A string such as ``<ul class="emojis" id="people">``.
        """
        attrs = "".join(
            f' {key}="{value}"' for key, value in self._element.attrib.items()
        )
        return f"<{self.tag}{attrs}>"


def document_from_html(
    content: str | bytes,
    encoding: str | None = "utf-8",
    source_url: str = "",
) -> ElementNode:
    """Parse an HTML document and return its root element.

    Args:
        content: Raw HTML as text or bytes.
        encoding: Encoding of ``content`` when given as bytes. Defaults to
            UTF-8 whatever the document declares; None lets lxml detect it
            from a meta tag and fall back to Latin-1 without one.
        source_url: URL the content came from, for error context.

    Returns:
        ElementNode wrapping the ``<html>`` root.

    Raises:
        DocumentParseError: If lxml cannot build a tree from the input.
    """
    if isinstance(content, str):
        # Text may carry an XML encoding declaration, which lxml refuses for
        # str input.
        content = content.encode("utf-8")
        encoding = "utf-8"

    try:
        parser = HTMLParser(encoding=encoding)
        root = document_fromstring(content, parser=parser)
    except (etree.ParserError, LookupError, ValueError) as e:
        raise DocumentParseError(
            f"failed to parse HTML: {e}", source_url
        ) from e

    return ElementNode(root)
