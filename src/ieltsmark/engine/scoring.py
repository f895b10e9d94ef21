"""Test scoring: per-question results, raw score and band score."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Optional

from ieltsmark.engine.validator import check_answer
from ieltsmark.engine.word_count import validate_word_limit

# (minimum percentage, band), highest first
BAND_THRESHOLDS: tuple[tuple[int, float], ...] = (
    (93, 9.0),
    (85, 8.5),
    (78, 8.0),
    (70, 7.5),
    (63, 7.0),
    (55, 6.5),
    (48, 6.0),
    (40, 5.5),
    (33, 5.0),
    (25, 4.5),
    (18, 4.0),
    (13, 3.5),
    (8, 3.0),
)
MIN_BAND = 2.5


@dataclass
class Question:
    number: int
    correct_answer: str
    question_type: Optional[str] = None
    explanation: str = ""
    max_words: Optional[int] = None
    max_numbers: Optional[int] = None

    @property
    def has_limit(self) -> bool:
        return self.max_words is not None or self.max_numbers is not None


@dataclass
class QuestionResult:
    question_number: int
    user_answer: str
    correct_answer: str
    is_correct: bool
    explanation: str = ""
    over_limit: bool = False


@dataclass
class PracticeResult:
    test_id: str
    score: int
    total_questions: int
    percentage: int
    band_score: float
    question_results: list[QuestionResult] = field(default_factory=list)


def band_score(percentage: float) -> float:
    for minimum, band in BAND_THRESHOLDS:
        if percentage >= minimum:
            return band
    return MIN_BAND


def percentage_of(score: int, total: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if total <= 0:
        return 0
    return math.floor(score * 100 / total + 0.5)


def grade_question(
    question: Question,
    user_answer: Optional[str],
    enforce_word_limit: bool = True,
) -> QuestionResult:
    answer = (user_answer or "").strip()
    over_limit = False
    if enforce_word_limit and answer and question.has_limit:
        limit = validate_word_limit(
            answer,
            question.max_words if question.max_words is not None else math.inf,
            question.max_numbers,
        )
        over_limit = not limit.valid

    is_correct = not over_limit and check_answer(
        answer, question.correct_answer, question.question_type
    )
    return QuestionResult(
        question_number=question.number,
        user_answer=answer,
        correct_answer=question.correct_answer,
        is_correct=is_correct,
        explanation=question.explanation,
        over_limit=over_limit,
    )


def grade_test(
    questions: Iterable[Question],
    answers: Mapping[int, str],
    test_id: str = "",
    enforce_word_limit: bool = True,
) -> PracticeResult:
    """Grade every question; unanswered questions count as wrong."""
    results = [
        grade_question(q, answers.get(q.number), enforce_word_limit=enforce_word_limit)
        for q in questions
    ]
    score = sum(1 for r in results if r.is_correct)
    percentage = percentage_of(score, len(results))
    return PracticeResult(
        test_id=test_id,
        score=score,
        total_questions=len(results),
        percentage=percentage,
        band_score=band_score(percentage),
        question_results=results,
    )


def with_default_limits(
    questions: Iterable[Question],
    max_words: Optional[int] = None,
    max_numbers: Optional[int] = None,
) -> list[Question]:
    """Fill in word/number limits for questions that do not set their own."""
    return [
        replace(
            q,
            max_words=q.max_words if q.max_words is not None else max_words,
            max_numbers=q.max_numbers if q.max_numbers is not None else max_numbers,
        )
        for q in questions
    ]
