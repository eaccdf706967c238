"""Structural extraction of emoji groups from the cheat sheet page.

The page has no schema beyond its nesting conventions::

    div#content
      h2                      -> group name
      ul.emojis[id]           -> one group
        li
          div                 -> record wrapper (first element child)
            span.name         -> record name (last one wins)

Each rule below matches one level of that nesting. Any deviation raises an
``ExtractionAssumptionException`` subclass and aborts the whole run; no
partial group list is ever returned.

Example::

    from emojisheet.extraction import parse

    groups = parse(html_bytes, source_url=url)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from emojisheet.common.exceptions import (
    ContainerNotFound,
    MissingCategory,
    MissingContainer,
    MissingPayload,
    UnexpectedTag,
)
from emojisheet.common.matchers import (
    has_attribute,
    has_class,
    is_element,
    require_attribute,
)
from emojisheet.common.nodes import (
    ElementNode,
    NodeKind,
    document_from_html,
)
from emojisheet.common.rules import DEFAULT_RULES, ExtractionRules
from emojisheet.data_types import Emoji, EmojiGroup

logger = logging.getLogger(__name__)


def parse(
    content: str | bytes,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
    encoding: str | None = "utf-8",
) -> list[EmojiGroup]:
    """Parse raw HTML and extract its emoji groups.

    Args:
        content: The cheat sheet page as text or bytes.
        rules: Document shape to match.
        source_url: URL the content came from, for error context.
        encoding: Encoding of ``content`` when given as bytes. See
            ``document_from_html``.

    Returns:
        Groups in document order, each with emojis sorted by name.

    Raises:
        DocumentParseError: If the HTML cannot be parsed.
        ExtractionAssumptionException: If the document shape doesn't match.
    """
    root = document_from_html(content, encoding, source_url)
    return extract(root, rules, source_url)


def extract(
    root: ElementNode,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
) -> list[EmojiGroup]:
    """Extract emoji groups from a parsed document.

    The tree is only read. Calling this twice on the same tree yields equal
    results.

    Args:
        root: Root element of the parsed document.
        rules: Document shape to match.
        source_url: URL the document came from, for error context.

    Returns:
        Groups in document order, each with emojis sorted by name.

    Raises:
        ExtractionAssumptionException: On the first structural mismatch.
    """
    container = find_container(root, rules, source_url)

    groups: list[EmojiGroup] = []
    for list_id, list_node in iter_lists(container, rules, source_url):
        category = resolve_category(list_node, list_id, rules, source_url)
        emojis = extract_records(list_node, list_id, rules, source_url)
        groups.append(assemble(category, emojis))
        logger.debug(
            f"Extracted group {category!r} from list id={list_id!r} "
            f"({len(emojis)} emojis)"
        )

    logger.info(
        f"Extracted {len(groups)} groups, "
        f"{sum(len(g.emojis) for g in groups)} emojis"
    )
    return groups


def find_container(
    root: ElementNode,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
) -> ElementNode:
    """Find the root container by a depth-first, pre-order walk.

    Raises:
        ContainerNotFound: If no element in the tree matches.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if is_element(node, rules.container_tag) and has_attribute(
            node, "id", rules.container_id
        ):
            return node
        stack.extend(reversed(list(node.element_children())))

    raise ContainerNotFound(
        rules.container_tag, rules.container_id, source_url
    )


def is_emoji_list(
    node: ElementNode, rules: ExtractionRules = DEFAULT_RULES
) -> bool:
    return is_element(node, rules.list_tag) and has_class(
        node, rules.list_class
    )


def iter_lists(
    container: ElementNode,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
) -> Iterator[tuple[str, ElementNode]]:
    """Yield ``(list_id, list_node)`` for each emoji list directly under the container.

    Only direct children are considered; anything that isn't an emoji list
    is skipped.

    Raises:
        MissingAttribute: If a matching list has no id.
    """
    for child in container.element_children():
        if not is_emoji_list(child, rules):
            continue

        list_id = require_attribute(
            child, rules.list_id_attribute, source_url
        )
        yield list_id, child


def resolve_category(
    list_node: ElementNode,
    list_id: str,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
) -> str:
    """Return the text of the nearest heading before ``list_node``.

    Raises:
        MissingCategory: If no heading precedes the list, or the nearest one
            doesn't start with text.
    """
    for sibling in list_node.preceding_siblings():
        if not is_element(sibling, rules.heading_tag):
            continue

        first = sibling.first_child()  # type: ignore[union-attr]
        if first is None or first.kind is not NodeKind.TEXT:
            raise MissingCategory(
                rules.heading_tag,
                list_id,
                reason=f"{rules.heading_tag} before list does not start with text",
                source_url=source_url,
            )

        name = first.data.strip()
        if not name:
            raise MissingCategory(
                rules.heading_tag,
                list_id,
                reason=f"{rules.heading_tag} before list is blank",
                source_url=source_url,
            )
        return name

    raise MissingCategory(rules.heading_tag, list_id, source_url=source_url)


def extract_records(
    list_node: ElementNode,
    list_id: str,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
) -> list[Emoji]:
    """Extract one Emoji per list item, in document order."""
    items = (
        child
        for child in list_node.element_children()
        if is_element(child, rules.item_tag)
    )
    return [
        extract_record(item, list_id, index, rules, source_url)
        for index, item in enumerate(items)
    ]


def extract_record(
    item: ElementNode,
    list_id: str,
    index: int,
    rules: ExtractionRules = DEFAULT_RULES,
    source_url: str = "",
) -> Emoji:
    """Extract a single Emoji from a list item.

    Args:
        item: The list item element.
        list_id: id of the enclosing list, for error context.
        index: Position of the item among the list's items.
        rules: Document shape to match.
        source_url: URL the document came from, for error context.

    Returns:
        Emoji with only ``name`` set.

    Raises:
        MissingContainer: If the item has no element child.
        UnexpectedTag: If the item's first element child isn't the wrapper tag.
        MissingPayload: If the wrapper holds no payload element.
    """
    wrapper = item.first_element_child()
    if wrapper is None:
        raise MissingContainer(rules.wrapper_tag, list_id, index, source_url)

    if wrapper.tag != rules.wrapper_tag:
        raise UnexpectedTag(
            rules.wrapper_tag, wrapper.tag, list_id, index, source_url
        )

    payload: ElementNode | None = None
    for child in wrapper.element_children():
        if is_element(child, rules.payload_tag) and has_class(
            child, rules.payload_class
        ):
            payload = child

    if payload is None:
        raise MissingPayload(
            rules.payload_tag,
            rules.payload_class,
            list_id,
            index,
            source_url,
        )

    return Emoji(name=_payload_text(payload, list_id, index))


def _payload_text(payload: ElementNode, list_id: str, index: int) -> str:
    first = payload.first_child()
    if first is None or first.kind is not NodeKind.TEXT:
        logger.warning(
            f"Emoji name in list id={list_id!r} item {index} is not plain "
            f"text: {payload.describe()}"
        )
        return ""
    return first.data.strip()  # type: ignore[union-attr]


def assemble(name: str, emojis: list[Emoji]) -> EmojiGroup:
    """Build a group with its emojis stably sorted by name."""
    return EmojiGroup(name=name, emojis=sorted(emojis, key=lambda e: e.name))
