#!/usr/bin/env python3
"""
Tests for parsing user input into typed answers.
"""

import pytest

from simple_interaction.models import (
    AnswerKind,
    NumberAnswer,
    PromptSpec,
    WordAnswer,
    YesNoAnswer,
    spec_from_choice_list,
    spec_from_word_message,
    spec_from_yesno_message,
)
from simple_interaction.validation.validator import VALIDATORS, validate


@pytest.mark.parametrize("text", ["y", "Y", "yes"])
def test_yes_answers(text):
    assert validate(spec_from_yesno_message("Continue?"), text) == YesNoAnswer(True)


@pytest.mark.parametrize("text", ["n", "N", "no"])
def test_no_answers(text):
    assert validate(spec_from_yesno_message("Continue?"), text) == YesNoAnswer(False)


@pytest.mark.parametrize("text", ["Yes", "YES", "No", "NO", "", " y", "yes please", "true", "1"])
def test_yes_no_rejects_everything_else(text):
    assert validate(spec_from_yesno_message("Continue?"), text) is None


def test_number_accepts_each_choice_position():
    spec = spec_from_choice_list(["apples", "oranges", "bananas"])
    for n in range(1, 4):
        assert validate(spec, str(n)) == NumberAnswer(n)


@pytest.mark.parametrize("text", ["0", "4", "-1", "+2", " 2", "2.0", "two", "", "²", "99999999999999999999", "9" * 5000, "0" * 5000, "0" * 4999 + "4"])
def test_number_rejects_out_of_range_and_non_numeric(text):
    spec = spec_from_choice_list(["apples", "oranges", "bananas"])
    assert validate(spec, text) is None


def test_number_leading_zeros_still_select_by_value():
    spec = spec_from_choice_list(["apples", "oranges", "bananas"])
    assert validate(spec, "02") == NumberAnswer(2)
    assert validate(spec, "0" * 5000 + "3") == NumberAnswer(3)


def test_number_without_choices_is_never_answerable():
    spec = PromptSpec(kind=AnswerKind.NUMBER, message="Pick one")
    for text in ["0", "1", "2", "", "yes"]:
        assert validate(spec, text) is None


@pytest.mark.parametrize("text", ["", "tea", "  green tea", "Yes", "42"])
def test_word_returns_input_verbatim(text):
    assert validate(spec_from_word_message("Drink?"), text) == WordAnswer(text)


def test_every_kind_has_a_validator():
    assert set(VALIDATORS) == set(AnswerKind)


def test_answer_kind_matches_answer_class():
    assert YesNoAnswer(True).kind is AnswerKind.YES_NO
    assert NumberAnswer(1).kind is AnswerKind.NUMBER
    assert WordAnswer("x").kind is AnswerKind.WORD
