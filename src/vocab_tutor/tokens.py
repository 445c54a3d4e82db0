"""Locate a target word inside a free-form sentence."""
from __future__ import annotations

import re
from typing import List, Optional

from .models import TokenSpan


def is_word_char(char: str) -> bool:
    """Return ``True`` for letters and the apostrophe, which both belong to a token."""

    return char.isalpha() or char == "'"


def locate(sentence: str, target: str) -> Optional[TokenSpan]:
    """Find ``target`` case-insensitively and widen the hit to full token boundaries.

    Searching ``"resilient"`` inside ``"resiliently"`` returns the whole
    ``"resiliently"`` token, so callers can tell a partial hit from an exact one.
    """

    if not target:
        return None
    match = re.search(re.escape(target), sentence, re.IGNORECASE)
    if match is None:
        return None
    start = _expand_left(sentence, match.start())
    end = _expand_right(sentence, match.end())
    return TokenSpan(start=start, end=end, text=sentence[start:end])


def words_before(sentence: str, span: TokenSpan) -> List[str]:
    """Whitespace separated words strictly before ``span``."""

    return sentence[: span.start].split()


def _expand_left(text: str, index: int) -> int:
    while index > 0 and is_word_char(text[index - 1]):
        index -= 1
    return index


def _expand_right(text: str, index: int) -> int:
    length = len(text)
    while index < length and is_word_char(text[index]):
        index += 1
    return index
