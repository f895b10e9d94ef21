"""Category matchers: one equivalence rule per kind of answer.

Every matcher takes two strings that have already been through
``normalize_text`` (the candidate's answer and one variation of the answer
key) and returns whether they are the same answer under its rule.
Matchers never raise; input a rule cannot parse simply does not match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from ieltsmark.engine.normalizer import remove_all_spaces
from ieltsmark.engine.variations import (
    CURRENCY_VARIATIONS,
    MEASUREMENT_VARIATIONS,
    NUMBER_SCALES,
    NUMBER_WORDS,
    ORDINAL_MAP,
    SPELLING_VARIATIONS,
    month_number,
    same_group,
)

Matcher = Callable[[str, str], bool]


def match_exact(user: str, correct: str) -> bool:
    return user == correct


def match_without_spaces(user: str, correct: str) -> bool:
    return remove_all_spaces(user) == remove_all_spaces(correct)


# --- Spelling ---


def spelling_equivalent(word1: str, word2: str) -> bool:
    """Check if two words are British/American spelling equivalents."""
    w1, w2 = word1.lower(), word2.lower()
    return w1 == w2 or same_group(SPELLING_VARIATIONS, w1, w2)


def match_spelling(user: str, correct: str) -> bool:
    user_words = user.split()
    correct_words = correct.split()
    if len(user_words) != len(correct_words):
        return False
    return all(spelling_equivalent(u, c) for u, c in zip(user_words, correct_words))


# --- Dates ---

_DAY = r"(\d{1,2}(?:st|nd|rd|th)?|[a-z]+(?:-[a-z]+)?)"
_DAY_MONTH = re.compile(rf"^{_DAY}\s+(?:of\s+)?([a-z]+)\.?$")
_MONTH_DAY = re.compile(rf"^([a-z]+)\.?\s+{_DAY}$")
_NUMERIC_PAIR = re.compile(r"^(\d{1,2})[/-](\d{1,2})$")
_DOTTED_PAIR = re.compile(r"^(\d{2})\.(\d{2})$")
_NUMERIC_FULL = re.compile(r"^(\d{1,4})[/.-](\d{1,2})[/.-](\d{1,4})$")
_SUFFIXED_DAY = re.compile(r"^(\d{1,2})(?:st|nd|rd|th)$")


def _day_number(token: str) -> Optional[int]:
    if token.isdigit():
        day = int(token)
    elif _SUFFIXED_DAY.match(token):
        day = int(_SUFFIXED_DAY.match(token).group(1))
    else:
        day = next(
            (int(forms[0]) for forms in ORDINAL_MAP.values() if token in forms),
            None,
        )
    if day is None or not 1 <= day <= 31:
        return None
    return day


def _month_name(token: str) -> Optional[int]:
    return month_number(token) if token.isalpha() else None


def _numeric_dates(first: int, second: int) -> set[tuple[int, int]]:
    """Every valid (day, month) reading of two numbers, in either order."""
    return {
        (day, month)
        for day, month in ((first, second), (second, first))
        if 1 <= day <= 31 and 1 <= month <= 12
    }


def date_interpretations(text: str) -> set[tuple[int, int]]:
    """Extract the possible (day, month) readings of a date string.

    Named months give a single reading. A numeric date whose parts are both
    12 or less is ambiguous and yields both DD/MM and MM/DD. A dotted pair
    such as ``15.03`` is only read as a date when it is unambiguous. The year
    of a full numeric date is ignored.
    """
    s = re.sub(r"^the\s+", "", text.lower().strip())

    for pattern, day_group, month_group in ((_DAY_MONTH, 1, 2), (_MONTH_DAY, 2, 1)):
        m = pattern.match(s)
        if m:
            day = _day_number(m.group(day_group))
            month = _month_name(m.group(month_group))
            if day and month:
                return {(day, month)}

    m = _NUMERIC_PAIR.match(s)
    if m:
        return _numeric_dates(int(m.group(1)), int(m.group(2)))

    # "15.03" is a date only when one part cannot be a month; "01.05" is a decimal
    m = _DOTTED_PAIR.match(s)
    if m:
        first, second = int(m.group(1)), int(m.group(2))
        return _numeric_dates(first, second) if max(first, second) > 12 else set()

    m = _NUMERIC_FULL.match(s)
    if m:
        first, second, third = m.groups()
        if len(first) == 4:
            # YYYY-MM-DD is never read the other way round
            day, month = int(third), int(second)
            return {(day, month)} if 1 <= day <= 31 and 1 <= month <= 12 else set()
        if len(third) in (2, 4):
            return _numeric_dates(int(first), int(second))

    return set()


def match_date(user: str, correct: str) -> bool:
    return bool(date_interpretations(user) & date_interpretations(correct))


# --- Times ---

_CLOCK = re.compile(r"^(\d{1,2})(?::(\d{2}))?(am|pm)?$")


def normalize_time(text: str) -> str:
    """Canonical time: ``9.30 a.m.`` and ``09:30am`` both become ``09:30am``."""
    s = re.sub(r"\s+", "", text.lower().strip())
    s = re.sub(r"o'?clock$", ":00", s)
    s = re.sub(r"(?<=\d)([ap])\.?m\.?$", r"\1m", s)
    s = s.replace(".", ":")
    if re.match(r"^\d{1,2}[ap]m$", s):
        s = s[:-2] + ":00" + s[-2:]
    if re.match(r"^\d:", s):
        s = "0" + s
    return s


def match_time(user: str, correct: str) -> bool:
    u, c = normalize_time(user), normalize_time(correct)
    if u == c:
        return True

    # "9:30" for "9:30am": only one side names the half of the day.
    mu, mc = _CLOCK.match(u), _CLOCK.match(c)
    if not (mu and mc) or bool(mu.group(3)) == bool(mc.group(3)):
        return False
    if mu.group(2) is None or mc.group(2) is None:
        return False
    return (int(mu.group(1)), mu.group(2)) == (int(mc.group(1)), mc.group(2))


# --- Numbers ---

_NUMERIC = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)$")

_SMALL_NUMBERS = {
    form: int(value)
    for value, forms in NUMBER_WORDS.items()
    if int(value) < 100
    for form in forms
    if form.isalpha() and form not in ("o", "oh")
}


def normalize_number(text: str) -> str:
    """Strip commas and whitespace: ``30,000`` and ``30 000`` become ``30000``."""
    return re.sub(r"[,\s]", "", text.lower())


def words_to_number(text: str) -> Optional[Decimal]:
    """Read an English number such as ``two hundred and fifty`` or ``2.5 million``."""
    tokens = [t for t in re.split(r"[\s-]+", text.lower().strip()) if t and t != "and"]
    if not tokens:
        return None

    total = Decimal(0)
    current = Decimal(0)
    try:
        for i, token in enumerate(tokens):
            if token in _SMALL_NUMBERS:
                value = _SMALL_NUMBERS[token]
                # "twenty five" is 25, "five five" is not a number
                if current % 100 and (value >= 10 or current % 10):
                    return None
                current += value
            elif _NUMERIC.match(token.replace(",", "")):
                if current:
                    return None
                current = Decimal(token.replace(",", ""))
            elif token == "a" and i == 0 and len(tokens) > 1:
                current += 1
            elif token in NUMBER_SCALES:
                scale = NUMBER_SCALES[token]
                current = current or Decimal(1)
                if scale == 100:
                    current *= scale
                else:
                    total += current * scale
                    current = Decimal(0)
            else:
                return None
    except InvalidOperation:
        # remainder of a value too large for the decimal context
        return None
    return total + current


def number_value(text: str) -> Optional[Decimal]:
    compact = normalize_number(text)
    if _NUMERIC.match(compact):
        return Decimal(compact)
    return words_to_number(text)


def match_ordinal(user: str, correct: str) -> bool:
    """``first`` and ``1st`` are the same ordinal; a bare ``1`` is a cardinal."""
    u, c = user.strip(), correct.strip()
    if u.isdigit() or c.isdigit():
        return False
    return same_group(ORDINAL_MAP, u, c)


def match_number(user: str, correct: str) -> bool:
    u, c = normalize_number(user), normalize_number(correct)
    if u == c:
        return True

    for forms in NUMBER_WORDS.values():
        compact_forms = [normalize_number(f) for f in forms]
        if u in compact_forms and c in compact_forms:
            return True

    if match_ordinal(user, correct):
        return True

    user_value, correct_value = number_value(user), number_value(correct)
    return user_value is not None and user_value == correct_value


# --- Measurements ---

_MEASUREMENT = re.compile(r"^([\d,.]+)\s*(.+)$")


@dataclass(frozen=True)
class Measurement:
    value: str
    unit: str


def parse_measurement(text: str) -> Optional[Measurement]:
    m = _MEASUREMENT.match(text.lower().strip())
    if not m:
        return None
    value = m.group(1).replace(",", "")
    if not any(ch.isdigit() for ch in value):
        return None
    return Measurement(value=value, unit=m.group(2).strip())


def match_measurement(user: str, correct: str) -> bool:
    user_m, correct_m = parse_measurement(user), parse_measurement(correct)
    if user_m is None or correct_m is None or user_m.value != correct_m.value:
        return False
    if same_group(MEASUREMENT_VARIATIONS, user_m.unit, correct_m.unit):
        return True
    return match_spelling(user_m.unit, correct_m.unit)


# --- Currency ---

_CURRENCY_SYMBOLS = ("a$", "c$", "$", "£", "€", "¥", "₹", "₽", "¢")
_CURRENCY_CODES = ("usd", "gbp", "eur", "jpy", "inr", "rub", "aud", "cad")
_CURRENCY_NAMES = sorted(
    {f for forms in CURRENCY_VARIATIONS.values() for f in forms if f not in _CURRENCY_SYMBOLS},
    key=len,
    reverse=True,
)


def _alternation(options) -> str:
    return "|".join(re.escape(o) for o in sorted(options, key=len, reverse=True))


_AMOUNT = r"(\d[\d,]*(?:\.\d+)?|\.\d+)"
_CURRENCY_FIRST = re.compile(
    rf"^({_alternation(_CURRENCY_SYMBOLS + _CURRENCY_CODES)})\s*{_AMOUNT}$"
)
_AMOUNT_FIRST = re.compile(
    rf"^{_AMOUNT}\s*({_alternation(_CURRENCY_SYMBOLS)}|{_alternation(_CURRENCY_NAMES)})$"
)


@dataclass(frozen=True)
class Money:
    amount: Decimal
    currency: str


def parse_currency(text: str) -> Optional[Money]:
    """Parse ``$50``, ``50$``, ``usd 50`` or ``50 dollars``."""
    s = text.lower().strip()
    m = _CURRENCY_FIRST.match(s)
    if m:
        currency, amount = m.groups()
    else:
        m = _AMOUNT_FIRST.match(s)
        if not m:
            return None
        amount, currency = m.groups()
    try:
        return Money(amount=Decimal(amount.replace(",", "")), currency=currency)
    except InvalidOperation:
        return None


def match_currency(user: str, correct: str) -> bool:
    user_money, correct_money = parse_currency(user), parse_currency(correct)
    if user_money is None or correct_money is None:
        return False
    if user_money.amount != correct_money.amount:
        return False
    return same_group(CURRENCY_VARIATIONS, user_money.currency, correct_money.currency)


# --- Phone numbers and codes ---


def normalize_phone_number(text: str) -> str:
    """``double 5`` and ``triple o`` are spelled out before ``o`` reads as zero."""
    s = text.lower()
    s = re.sub(r"double\s*([\do])", r"\1\1", s)
    s = re.sub(r"triple\s*([\do])", r"\1\1\1", s)
    s = re.sub(r"\s+", "", s)
    s = s.replace("o", "0")
    return re.sub(r"[-()]", "", s)


def match_phone_number(user: str, correct: str) -> bool:
    return normalize_phone_number(user) == normalize_phone_number(correct)


def normalize_alphanumeric_code(code: str) -> str:
    """Postcodes and flight numbers: spacing ignored, letter O read as zero."""
    return re.sub(r"\s+", "", code.upper()).replace("O", "0")


def match_alphanumeric_code(user: str, correct: str) -> bool:
    return normalize_alphanumeric_code(user) == normalize_alphanumeric_code(correct)


# --- Hyphens and articles ---


def match_hyphenation(user: str, correct: str) -> bool:
    def spaced(s: str) -> str:
        return re.sub(r"\s+", " ", s.replace("-", " ")).strip()

    def hyphenated(s: str) -> str:
        return re.sub(r"\s+", "-", s)

    return spaced(user) == spaced(correct) or hyphenated(user) == hyphenated(correct)


_LEADING_ARTICLE = re.compile(r"^(?:the|a|an)\s+")


def strip_article(text: str) -> str:
    return _LEADING_ARTICLE.sub("", text, count=1)


def match_without_article(user: str, correct: str) -> bool:
    return strip_article(user) == strip_article(correct)


# Cascade order used by the single-answer validator.
MATCHERS: tuple[tuple[str, Matcher], ...] = (
    ("exact", match_exact),
    ("no_space", match_without_spaces),
    ("spelling", match_spelling),
    ("date", match_date),
    ("time", match_time),
    ("number", match_number),
    ("measurement", match_measurement),
    ("currency", match_currency),
    ("phone_number", match_phone_number),
    ("alphanumeric_code", match_alphanumeric_code),
    ("hyphenation", match_hyphenation),
    ("article", match_without_article),
)
