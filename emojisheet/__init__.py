"""Emoji cheat sheet extractor.

This package downloads an emoji cheat sheet page, extracts its named groups
of emojis with a strict structural parser, looks up each emoji's character,
and renders the result as a Python module.

The extraction engine (``emojisheet.extraction``) performs no I/O; retrieval,
enrichment and code generation live in their own modules.
"""
