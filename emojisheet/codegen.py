"""Render enriched groups as a Python module.

The generated module has no imports and exposes two names:

- ``GROUPS``: tuple of ``(group_name, ((emoji_name, code), ...))`` in page
  order
- ``EMOJIS``: dict of ``emoji_name: code``; when a name appears in more than
  one group the first occurrence wins
"""

from __future__ import annotations

import logging
from pathlib import Path

from emojisheet.data_types import EmojiGroup

logger = logging.getLogger(__name__)

INDENT = "    "


def _header(source_url: str) -> list[str]:
    source = " ".join(source_url.split()) or "unknown source"
    return [
        "# Code generated by emojisheet. DO NOT EDIT.",
        f"# Source: {source}",
        '"""Emoji cheat sheet groups and codes."""',
        "",
    ]


def generate_module(groups: list[EmojiGroup], source_url: str = "") -> str:
    """Render ``groups`` as Python source.

    Args:
        groups: Groups to render, usually enriched.
        source_url: URL the data came from, recorded in the header.

    Returns:
        The module source, ending with a newline.
    """
    lines = _header(source_url)

    lines.append("GROUPS = (")
    for group in groups:
        lines.append(f"{INDENT}(")
        lines.append(f"{INDENT * 2}{group.name!r},")
        lines.append(f"{INDENT * 2}(")
        for item in group.emojis:
            lines.append(f"{INDENT * 3}({item.name!r}, {item.code!r}),")
        lines.append(f"{INDENT * 2}),")
        lines.append(f"{INDENT}),")
    lines.append(")")
    lines.append("")

    codes: dict[str, str] = {}
    for group in groups:
        for item in group.emojis:
            codes.setdefault(item.name, item.code)

    lines.append("EMOJIS = {")
    for name, code in codes.items():
        lines.append(f"{INDENT}{name!r}: {code!r},")
    lines.append("}")

    return "\n".join(lines) + "\n"


def write_module(
    groups: list[EmojiGroup], path: Path, source_url: str = ""
) -> Path:
    """Render ``groups`` and write them to ``path`` as UTF-8.

    Returns:
        The path written.
    """
    source = generate_module(groups, source_url)
    path.write_text(source, encoding="utf-8")
    logger.info(f"Wrote {len(groups)} groups to {path}")
    return path
