"""Answer-key parsing: alternatives and optional words.

An answer key such as ``(the) hospital/clinic`` holds ``/``-separated
alternatives, each of which may mark optional words in parentheses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_NUMERIC_DATE_KEY = re.compile(r"^(?:\d{1,2}/\d{1,2}(?:/\d{2}|/\d{4})?|\d{4}/\d{1,2}/\d{1,2})$")
_OPTIONAL = re.compile(r"\(([^)]+)\)")
_OPTIONAL_WITH_SPACE = re.compile(r"\([^)]+\)\s*")


@dataclass
class Alternative:
    required: str
    optional: list[str] = field(default_factory=list)
    variations: list[str] = field(default_factory=list)


def split_alternatives(answer_key: str) -> list[str]:
    """Split an answer key into its trimmed alternatives.

    A key that reads as a numeric date (``03/15``) is also kept whole, after
    its ``/``-separated parts.
    """
    alternatives = [part.strip() for part in answer_key.split("/")]
    whole = answer_key.strip()
    if len(alternatives) > 1 and _NUMERIC_DATE_KEY.match(whole):
        alternatives.append(whole)
    return alternatives


def parse_alternative(answer: str) -> Alternative:
    """Expand one alternative into the variations it accepts.

    Only the required form and each optional word placed before or after it
    are produced; optional words are never combined with each other.
    """
    optional = [m.group(1).strip().lower() for m in _OPTIONAL.finditer(answer)]
    required = _OPTIONAL_WITH_SPACE.sub("", answer).strip().lower()

    variations = [required]
    for opt in optional:
        for variation in (f"{opt} {required}", f"{required} {opt}"):
            if variation not in variations:
                variations.append(variation)

    return Alternative(required=required, optional=optional, variations=variations)


def expand_answer_key(answer_key: str) -> list[Alternative]:
    return [parse_alternative(alt) for alt in split_alternatives(answer_key)]
