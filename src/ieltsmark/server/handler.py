"""Server handler: dispatches JSON-lines requests to the marking engine."""

from __future__ import annotations

import math
from dataclasses import asdict
from typing import Callable, Optional

from ieltsmark.config.settings import Settings
from ieltsmark.engine.scoring import band_score, grade_test, with_default_limits
from ieltsmark.engine.sheet_loader import parse_answers, parse_sheet
from ieltsmark.engine.validator import check_answer, check_multiple_choice_multiple
from ieltsmark.engine.word_count import count_words, validate_word_limit

from .protocol import Notification, Request


def _result_to_dict(result) -> dict:
    return {
        "questionNumber": result.question_number,
        "userAnswer": result.user_answer,
        "correctAnswer": result.correct_answer,
        "isCorrect": result.is_correct,
        "explanation": result.explanation,
        "overLimit": result.over_limit,
    }


def _as_text(value) -> str:
    return "" if value is None else str(value)


class ServerHandler:
    """Routes incoming requests to engine functions and returns result dicts."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        write_notification: Optional[Callable[[Notification], None]] = None,
    ):
        self.settings = settings or Settings.load()
        self._write_notification = write_notification or (lambda n: None)

    async def dispatch(self, msg: dict) -> dict:
        """Route a request message to the appropriate handler method."""
        request = Request.from_dict({"method": "", **msg})

        handler_map = {
            "checkAnswer": self._check_answer,
            "checkMultipleChoiceMultiple": self._check_multiple_choice_multiple,
            "countWords": self._count_words,
            "validateWordLimit": self._validate_word_limit,
            "bandScore": self._band_score,
            "gradeTest": self._grade_test,
        }

        handler = handler_map.get(request.method)
        if handler is None:
            raise ValueError(f"Unknown method: {request.method}")

        return await handler(request)

    async def _check_answer(self, request: Request) -> dict:
        correct = check_answer(
            _as_text(request.param("userAnswer")),
            _as_text(request.param("correctAnswer")),
            request.param("questionType", None),
        )
        return {"correct": correct}

    async def _check_multiple_choice_multiple(self, request: Request) -> dict:
        correct = check_multiple_choice_multiple(
            _as_text(request.param("userAnswer")),
            _as_text(request.param("correctAnswer")),
        )
        return {"correct": correct}

    async def _count_words(self, request: Request) -> dict:
        return asdict(count_words(_as_text(request.param("text"))))

    async def _validate_word_limit(self, request: Request) -> dict:
        max_numbers = request.param("maxNumbers", None)
        result = validate_word_limit(
            _as_text(request.param("text")),
            int(request.param("maxWords")),
            None if max_numbers is None else int(max_numbers),
        )
        return {
            "valid": result.valid,
            "wordCount": result.word_count,
            "numberCount": result.number_count,
        }

    async def _band_score(self, request: Request) -> dict:
        percentage = float(request.param("percentage"))
        if math.isnan(percentage):
            raise ValueError("percentage must be a number")
        return {"bandScore": band_score(percentage)}

    async def _grade_test(self, request: Request) -> dict:
        sheet = parse_sheet({
            "test": {"id": request.param("testId", "")},
            "questions": request.param("questions"),
        })
        answers = parse_answers(request.param("answers", {}))

        marking = self.settings.marking
        questions = with_default_limits(
            sheet.questions, marking.default_max_words, marking.default_max_numbers
        )
        result = grade_test(
            questions,
            answers,
            test_id=sheet.id,
            enforce_word_limit=marking.enforce_word_limits,
        )

        for question_result in result.question_results:
            self._write_notification(
                Notification("questionGraded", _result_to_dict(question_result))
            )

        return {
            "testId": result.test_id,
            "score": result.score,
            "totalQuestions": result.total_questions,
            "percentage": result.percentage,
            "bandScore": result.band_score,
            "questionResults": [_result_to_dict(r) for r in result.question_results],
        }
