"""Attach emoji characters to extracted names.

The lookup table comes from the ``emoji`` package. Names are looked up in
``:name:`` form, the same form the cheat sheet uses. Unknown names are not an
error; they keep an empty code.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import emoji

from emojisheet.data_types import EmojiGroup

logger = logging.getLogger(__name__)


def build_code_map() -> dict[str, str]:
    """Build the ``:name:`` -> character lookup table.

    Both the canonical English names and the aliases are included. When two
    characters share an alias, the first one seen keeps it.

    Returns:
        Mapping from ``:name:`` strings to emoji characters.
    """
    code_map: dict[str, str] = {}
    for char, data in emoji.EMOJI_DATA.items():
        code_map.setdefault(data["en"], char)
        for alias in data.get("alias", []):
            code_map.setdefault(alias, char)
    return code_map


def enrich(
    groups: list[EmojiGroup],
    code_map: Mapping[str, str] | None = None,
) -> list[EmojiGroup]:
    """Return copies of ``groups`` with each emoji's code filled in.

    Args:
        groups: Extracted groups; not modified.
        code_map: ``:name:`` -> character table. Defaults to
            ``build_code_map()``.

    Returns:
        New groups in the same order, with ``code`` set on every emoji. Names
        missing from the table get an empty code.
    """
    if code_map is None:
        code_map = build_code_map()

    enriched: list[EmojiGroup] = []
    misses = 0
    for group in groups:
        emojis = []
        for item in group.emojis:
            code = code_map.get(f":{item.name}:", "")
            if not code:
                misses += 1
            emojis.append(item.model_copy(update={"code": code}))
        enriched.append(group.model_copy(update={"emojis": emojis}))

    if misses:
        logger.debug(f"No code found for {misses} emoji names")
    return enriched
