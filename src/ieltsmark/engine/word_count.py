"""Word and number counting for answer-length limits.

Instructions such as "NO MORE THAN TWO WORDS AND/OR A NUMBER" budget words
and numbers separately:

- a hyphenated word (``mother-in-law``) is one word
- a number written in digits, including dates and times (``15.05.2025``,
  ``9.30am``), is one number and no word
- an ordinal in digits (``15th``) is one word and one number
- symbols such as ``$``, ``£`` and ``%`` are not counted
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_SYMBOLS = re.compile(r"[$£€¥%@#&*]")
_NUMERAL = re.compile(r"^[\d,.:/-]+(?:am|pm)?$", re.IGNORECASE)
_ORDINAL = re.compile(r"^\d+(?:st|nd|rd|th)$", re.IGNORECASE)


@dataclass
class WordCount:
    words: int = 0
    numbers: int = 0


@dataclass
class WordLimitResult:
    valid: bool
    word_count: int
    number_count: int


def count_words(text: str) -> WordCount:
    if not text:
        return WordCount()

    count = WordCount()
    for token in _SYMBOLS.sub("", text).split():
        if _NUMERAL.match(token):
            count.numbers += 1
        elif _ORDINAL.match(token):
            count.words += 1
            count.numbers += 1
        else:
            count.words += 1
    return count


def validate_word_limit(
    text: str,
    max_words: int,
    max_numbers: Optional[float] = None,
) -> WordLimitResult:
    """Check an answer against a word budget and an optional number budget.

    Numbers do not use up the word budget. ``max_numbers=None`` means no
    limit on numbers.
    """
    count = count_words(text)
    numbers_ok = max_numbers is None or count.numbers <= max_numbers
    return WordLimitResult(
        valid=count.words <= max_words and numbers_ok,
        word_count=count.words,
        number_count=count.numbers,
    )
