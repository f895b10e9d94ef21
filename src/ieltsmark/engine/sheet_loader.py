"""YAML answer-sheet parser for ieltsmark."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from ieltsmark.engine.scoring import Question


@dataclass
class AnswerSheet:
    id: str
    title: str
    questions: list[Question] = field(default_factory=list)
    source: Optional[Path] = None


def _optional_int(raw: dict, key: str, number) -> Optional[int]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"Question {number}: {key} must be a non-negative integer")
    return value


def _parse_question(raw) -> Question:
    if not isinstance(raw, dict):
        raise ValueError(f"Question entries must be mappings, got {raw!r}")
    if "number" not in raw or "answer" not in raw:
        raise ValueError(f"Question is missing 'number' or 'answer': {raw!r}")

    number = raw["number"]
    if not isinstance(number, int):
        raise ValueError(f"Question number must be an integer, got {number!r}")

    return Question(
        number=number,
        correct_answer=str(raw["answer"]),
        question_type=raw.get("type"),
        explanation=raw.get("explanation", "") or "",
        max_words=_optional_int(raw, "max_words", number),
        max_numbers=_optional_int(raw, "max_numbers", number),
    )


def parse_sheet(data, source: Optional[Path] = None) -> AnswerSheet:
    """Build an AnswerSheet from already-decoded YAML/JSON data."""
    if not isinstance(data, dict) or not isinstance(data.get("questions"), list):
        raise ValueError("Answer sheet must be a mapping with a 'questions' list")

    meta = data.get("test") or {}
    questions = [_parse_question(raw) for raw in data["questions"]]

    numbers = [q.number for q in questions]
    duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate question numbers: {duplicates}")

    return AnswerSheet(
        id=str(meta.get("id", source.stem if source else "")),
        title=meta.get("title", ""),
        questions=questions,
        source=source,
    )


def load_sheet(path: Path) -> AnswerSheet:
    """Load an answer sheet (questions and keys) from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return parse_sheet(data, source=Path(path))


def parse_answers(data) -> dict[int, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Answers must be a mapping of question number to answer")

    answers: dict[int, str] = {}
    for key, value in data.items():
        try:
            number = int(key)
        except (TypeError, ValueError):
            raise ValueError(f"Answer key {key!r} is not a question number") from None
        answers[number] = "" if value is None else str(value)
    return answers


def load_answers(path: Path) -> dict[int, str]:
    """Load a candidate's answers: a YAML mapping of question number to answer.

    Times must be quoted (``"9:30"``); YAML reads a bare ``9:30`` as 570.
    """
    with open(path) as f:
        data = yaml.safe_load(f)
    return parse_answers(data)
