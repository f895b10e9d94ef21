"""Shared fixtures for ieltsmark tests."""

from __future__ import annotations

import pytest
import yaml


SAMPLE_SHEET = {
    "test": {"id": "reading-01", "title": "Practice Reading 1"},
    "questions": [
        {
            "number": 1,
            "type": "FILL_IN_BLANK",
            "answer": "(the) hospital/clinic",
            "max_words": 2,
        },
        {
            "number": 2,
            "type": "MULTIPLE_CHOICE_MULTIPLE",
            "answer": "A,C",
        },
        {
            "number": 3,
            "answer": "15 March",
            "explanation": "Paragraph C gives the opening date.",
        },
        {
            "number": 4,
            "type": "MATCHING_SENTENCE_ENDINGS",
            "answer": "B",
        },
    ],
}

SAMPLE_ANSWERS = {
    1: "the hospital",
    2: "C, A",
    3: "March 15th",
    4: "D",
}


@pytest.fixture
def sheet_data():
    return yaml.safe_load(yaml.dump(SAMPLE_SHEET))


@pytest.fixture
def sample_sheet_file(tmp_path):
    """Write a small answer sheet to disk."""
    path = tmp_path / "reading-01.yaml"
    with open(path, "w") as f:
        yaml.dump(SAMPLE_SHEET, f)
    return path


@pytest.fixture
def sample_answers_file(tmp_path):
    path = tmp_path / "answers.yaml"
    with open(path, "w") as f:
        yaml.dump(SAMPLE_ANSWERS, f)
    return path


@pytest.fixture
def config_file(tmp_path):
    """An isolated config file so tests never read ~/.ieltsmark."""
    path = tmp_path / "config.yaml"
    with open(path, "w") as f:
        yaml.dump({"data_dir": str(tmp_path / "data")}, f)
    return path
