"""Tests for the ServerHandler dispatch layer."""

from __future__ import annotations

import pytest

from ieltsmark.config.settings import MarkingConfig, Settings
from ieltsmark.server.handler import ServerHandler
from ieltsmark.server.protocol import Notification


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def handler(tmp_path, notifications):
    settings = Settings(data_dir=tmp_path / "data")
    return ServerHandler(settings=settings, write_notification=notifications.append)


class TestDispatch:
    @pytest.mark.asyncio
    async def test_unknown_method(self, handler):
        with pytest.raises(ValueError, match="Unknown method"):
            await handler.dispatch({"method": "nonExistent", "params": {}})

    @pytest.mark.asyncio
    async def test_missing_param(self, handler):
        with pytest.raises(ValueError, match="correctAnswer"):
            await handler.dispatch({"method": "checkAnswer", "params": {"userAnswer": "x"}})


class TestCheckAnswer:
    @pytest.mark.asyncio
    async def test_free_text(self, handler):
        result = await handler.dispatch({
            "method": "checkAnswer",
            "params": {"userAnswer": "the hospital", "correctAnswer": "(the) hospital/clinic"},
        })
        assert result == {"correct": True}

    @pytest.mark.asyncio
    async def test_question_type(self, handler):
        result = await handler.dispatch({
            "method": "checkAnswer",
            "params": {
                "userAnswer": "C,A",
                "correctAnswer": "A,C",
                "questionType": "MULTIPLE_CHOICE_MULTIPLE",
            },
        })
        assert result["correct"] is True

    @pytest.mark.asyncio
    async def test_multiple_choice_multiple(self, handler):
        result = await handler.dispatch({
            "method": "checkMultipleChoiceMultiple",
            "params": {"userAnswer": "A", "correctAnswer": "A,C"},
        })
        assert result["correct"] is False


class TestCounting:
    @pytest.mark.asyncio
    async def test_count_words(self, handler):
        result = await handler.dispatch({
            "method": "countWords",
            "params": {"text": "mother-in-law and 15th of May"},
        })
        assert result == {"words": 5, "numbers": 1}

    @pytest.mark.asyncio
    async def test_validate_word_limit(self, handler):
        result = await handler.dispatch({
            "method": "validateWordLimit",
            "params": {"text": "the old hospital", "maxWords": 2},
        })
        assert result == {"valid": False, "wordCount": 3, "numberCount": 0}

    @pytest.mark.asyncio
    async def test_band_score(self, handler):
        result = await handler.dispatch({"method": "bandScore", "params": {"percentage": 75}})
        assert result == {"bandScore": 7.5}


class TestGradeTest:
    QUESTIONS = [
        {"number": 1, "answer": "(the) hospital/clinic"},
        {"number": 2, "answer": "A,C", "type": "MULTIPLE_CHOICE_MULTIPLE"},
    ]

    @pytest.mark.asyncio
    async def test_grade(self, handler, notifications):
        result = await handler.dispatch({
            "method": "gradeTest",
            "params": {
                "testId": "listening-03",
                "questions": self.QUESTIONS,
                "answers": {"1": "the hospital", "2": "A,B"},
            },
        })
        assert result["testId"] == "listening-03"
        assert result["score"] == 1
        assert result["totalQuestions"] == 2
        assert result["percentage"] == 50
        assert result["bandScore"] == 6.0
        assert result["questionResults"][0]["isCorrect"] is True
        assert result["questionResults"][1]["userAnswer"] == "A,B"

        assert len(notifications) == 2
        assert all(isinstance(n, Notification) for n in notifications)
        assert notifications[0].method == "questionGraded"
        assert notifications[0].params["questionNumber"] == 1

    @pytest.mark.asyncio
    async def test_default_word_limit(self, tmp_path):
        settings = Settings(data_dir=tmp_path, marking=MarkingConfig(default_max_words=1))
        handler = ServerHandler(settings=settings)
        result = await handler.dispatch({
            "method": "gradeTest",
            "params": {"questions": self.QUESTIONS[:1], "answers": {"1": "the hospital"}},
        })
        assert result["questionResults"][0]["overLimit"] is True
        assert result["score"] == 0

    @pytest.mark.asyncio
    async def test_malformed_questions(self, handler):
        with pytest.raises(ValueError, match="missing"):
            await handler.dispatch({
                "method": "gradeTest",
                "params": {"questions": [{"number": 1}], "answers": {}},
            })
