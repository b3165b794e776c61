#!/usr/bin/env python3
"""
Tests for YAML questionnaires.
"""

import io
from pathlib import Path

import pytest

from simple_interaction.configuration.questionnaire import (
    QuestionnaireError,
    load_questionnaire,
    parse_questionnaire,
    run_questionnaire,
)
from simple_interaction.configuration.settings import InteractionSettings
from simple_interaction.interaction import ExhaustedRetriesError
from simple_interaction.models import AnswerKind


DINNER_QUESTIONNAIRE = Path(__file__).resolve().parents[3] / "data" / "questionnaires" / "dinner.yaml"


def test_load_bundled_dinner_questionnaire():
    questions = load_questionnaire(DINNER_QUESTIONNAIRE)
    assert [q.key for q in questions] == ["likes_apples", "dinner", "drink"]
    assert [q.spec.kind for q in questions] == [AnswerKind.YES_NO, AnswerKind.NUMBER, AnswerKind.WORD]
    assert questions[1].spec.choices == ["apples", "pizza", "ravioli"]
    assert questions[1].spec.max_attempts == 3


def test_run_questionnaire_collects_answers_in_order():
    questions = load_questionnaire(DINNER_QUESTIONNAIRE)
    out = io.StringIO()
    answers = run_questionnaire(
        questions,
        InteractionSettings(default_max_attempts=2),
        input_stream=io.StringIO("y\n2\nwater\n"),
        output_stream=out,
    )
    assert answers == {"likes_apples": True, "dinner": 2, "drink": "water"}
    assert list(answers) == ["likes_apples", "dinner", "drink"]
    assert "What would you like to eat?\n1. apples\n2. pizza\n3. ravioli\n> " in out.getvalue()


def test_run_questionnaire_uses_settings_message_and_bound():
    questions = parse_questionnaire({"questions": [{"key": "ok", "kind": "yes_no", "message": "OK?"}]})
    out = io.StringIO()
    with pytest.raises(ExhaustedRetriesError):
        run_questionnaire(
            questions,
            InteractionSettings(default_max_attempts=1, invalid_message="No good: {input}"),
            input_stream=io.StringIO("sure\n"),
            output_stream=out,
        )
    assert "No good: sure" in out.getvalue()


@pytest.mark.parametrize(
    "data",
    [
        None,
        {"questions": "nope"},
        {"questions": ["just a string"]},
        {"questions": [{"kind": "word", "message": "x"}]},
        {"questions": [{"key": "a", "kind": "colour", "message": "x"}]},
        {"questions": [{"key": "a", "kind": "word", "message": "x", "choices": ["1"]}]},
        {"questions": [{"key": "a", "kind": "number", "message": "x", "choices": "abc"}]},
        {"questions": [{"key": "a", "kind": "word", "message": "x", "max_attempts": 0}]},
        {"questions": [{"key": "a", "kind": "word", "message": "x", "colour": "red"}]},
        {"questions": [{"key": "a", "kind": "word"}, {"key": "a", "kind": "word"}]},
    ],
)
def test_malformed_questionnaires_rejected(data):
    with pytest.raises(QuestionnaireError):
        parse_questionnaire(data)


def test_invalid_yaml_rejected(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("questions: [\n", encoding="utf-8")
    with pytest.raises(QuestionnaireError):
        load_questionnaire(path)


def test_missing_questionnaire_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_questionnaire(tmp_path / "absent.yaml")
