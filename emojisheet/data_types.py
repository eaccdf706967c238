"""Pydantic data models for extracted cheat sheet data.

An ``EmojiGroup`` is one heading + list pair from the page; each ``Emoji``
is one list item. The extractor fills only ``Emoji.name``; ``Emoji.code`` is
populated later by enrichment.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Emoji(BaseModel):
    """A single cheat sheet entry."""

    name: str = Field(..., description="Short name, e.g. smile")
    code: str = Field(
        "", description="Emoji character; empty until enriched or if unknown"
    )


class EmojiGroup(BaseModel):
    """A named category of emojis, in page order."""

    name: str = Field(
        ..., min_length=1, description="Text of the preceding heading"
    )
    emojis: list[Emoji] = Field(
        default_factory=list, description="Entries sorted by name"
    )
