"""Answer normalization for comparison."""

from __future__ import annotations

import re

_SINGLE_QUOTES = re.compile("[‘’‚‛ʼ′`]")
_DOUBLE_QUOTES = re.compile("[“”„‟″]")


def normalize_text(text: str) -> str:
    """Normalize text for comparison: lowercase, strip, collapse whitespace, straighten quotes."""
    text = text.lower().strip()
    text = re.sub(r"\s+", " ", text)
    text = _SINGLE_QUOTES.sub("'", text)
    return _DOUBLE_QUOTES.sub('"', text)


def remove_all_spaces(text: str) -> str:
    """Drop every whitespace character; the looser second comparison pass."""
    return re.sub(r"\s+", "", text)


def normalize_choice(choice: str) -> str:
    """Normalize one option of a multi-select answer."""
    return normalize_text(choice)
