"""Answer validation following the IELTS marking conventions.

``check_answer`` is the entry point: it picks a comparator from the question
type, and for free-text answers runs every variation of the answer key
through the matcher cascade in ``ieltsmark.engine.matchers``.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Optional, Union

from ieltsmark.engine.answer_key import expand_answer_key
from ieltsmark.engine.matchers import MATCHERS
from ieltsmark.engine.normalizer import normalize_choice, normalize_text

logger = logging.getLogger(__name__)


class QuestionType(str, Enum):
    TRUE_FALSE_NOT_GIVEN = "TRUE_FALSE_NOT_GIVEN"
    YES_NO_NOT_GIVEN = "YES_NO_NOT_GIVEN"
    MATCHING_HEADINGS = "MATCHING_HEADINGS"
    MATCHING_INFORMATION = "MATCHING_INFORMATION"
    MATCHING_SENTENCE_ENDINGS = "MATCHING_SENTENCE_ENDINGS"
    MATCHING_CORRECT_LETTER = "MATCHING_CORRECT_LETTER"
    MULTIPLE_CHOICE = "MULTIPLE_CHOICE"
    MULTIPLE_CHOICE_SINGLE = "MULTIPLE_CHOICE_SINGLE"
    MULTIPLE_CHOICE_MULTIPLE = "MULTIPLE_CHOICE_MULTIPLE"
    FILL_IN_BLANK = "FILL_IN_BLANK"
    SENTENCE_COMPLETION = "SENTENCE_COMPLETION"
    TABLE_COMPLETION = "TABLE_COMPLETION"
    FLOWCHART_COMPLETION = "FLOWCHART_COMPLETION"
    MAP_LABELING = "MAP_LABELING"
    SUMMARY_COMPLETION = "SUMMARY_COMPLETION"
    NOTE_COMPLETION = "NOTE_COMPLETION"
    DRAG_AND_DROP_OPTIONS = "DRAG_AND_DROP_OPTIONS"


def check_ielts_answer(user_answer: str, correct_answers: str) -> bool:
    """Check a free-text answer against an answer key.

    The key may list ``/``-separated alternatives with optional words in
    parentheses, e.g. ``(the) hospital/clinic``.
    """
    if not user_answer or not correct_answers:
        return False

    user = normalize_text(user_answer)
    if not user:
        return False

    for alternative in expand_answer_key(correct_answers):
        for variation in alternative.variations:
            correct = normalize_text(variation)
            if not correct:
                continue
            for name, matcher in MATCHERS:
                if matcher(user, correct):
                    logger.debug("%r matched %r by %s rule", user_answer, variation, name)
                    return True

    return False


def check_multiple_choice_multiple(user_answer: str, correct_answer: str) -> bool:
    """Compare comma-separated selections as sets (order and repeats ignored)."""
    if not user_answer or not correct_answer:
        return False

    user_options = {normalize_choice(o) for o in user_answer.split(",")} - {""}
    correct_options = {normalize_choice(o) for o in correct_answer.split(",")} - {""}
    if len(user_options) != len(correct_options):
        return False
    return user_options <= correct_options and correct_options <= user_options


_IDENTIFIER = re.compile(r"^([A-Z]|\d+|[ivxlcdm]+)\b", re.IGNORECASE)


def extract_identifier(text: str) -> str:
    """Leading option id of an answer: ``B. lost their jobs`` gives ``B``."""
    trimmed = (text or "").strip()
    m = _IDENTIFIER.match(trimmed)
    return (m.group(1) if m else trimmed).upper()


def identifiers_match(user_answer: str, correct_answer: str) -> bool:
    if not user_answer or not correct_answer:
        return False
    return extract_identifier(user_answer) == extract_identifier(correct_answer)


def check_answer(
    user_answer: str,
    correct_answer: str,
    question_type: Optional[Union[QuestionType, str]] = None,
) -> bool:
    """Route an answer to the comparator for its question type."""
    if question_type == QuestionType.MULTIPLE_CHOICE_MULTIPLE:
        return check_multiple_choice_multiple(user_answer, correct_answer)
    if question_type == QuestionType.MATCHING_SENTENCE_ENDINGS:
        return identifiers_match(user_answer, correct_answer)
    return check_ielts_answer(user_answer, correct_answer)
