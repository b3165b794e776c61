"""Parses trimmed user input against the answer shape a PromptSpec expects.

Invalid input is reported by returning None so the loop can ask again.
"""

from typing import Callable, Optional

from simple_interaction.models.answer import AnswerValue, NumberAnswer, WordAnswer, YesNoAnswer
from simple_interaction.models.answer_kind import AnswerKind
from simple_interaction.models.prompt_spec import PromptSpec


# Exact matches only: "Yes" and "YES" are rejected.
YES_ANSWERS = frozenset({"y", "Y", "yes"})
NO_ANSWERS = frozenset({"n", "N", "no"})


def _validate_yes_no(spec: PromptSpec, text: str) -> Optional[AnswerValue]:
    if text in YES_ANSWERS:
        return YesNoAnswer(True)
    if text in NO_ANSWERS:
        return YesNoAnswer(False)
    return None


def _validate_number(spec: PromptSpec, text: str) -> Optional[AnswerValue]:
    # isdigit() alone accepts non-ASCII digits such as "²"
    if not (text.isascii() and text.isdigit()):
        return None
    # More significant digits than the largest position is out of range
    significant = text.lstrip("0")
    if len(significant) > len(str(len(spec.choices))):
        return None
    selection = int(significant or "0")
    if 1 <= selection <= len(spec.choices):
        return NumberAnswer(selection)
    return None


def _validate_word(spec: PromptSpec, text: str) -> Optional[AnswerValue]:
    return WordAnswer(text)


VALIDATORS: dict[AnswerKind, Callable[[PromptSpec, str], Optional[AnswerValue]]] = {
    AnswerKind.YES_NO: _validate_yes_no,
    AnswerKind.NUMBER: _validate_number,
    AnswerKind.WORD: _validate_word,
}


def validate(spec: PromptSpec, text: str) -> Optional[AnswerValue]:
    return VALIDATORS[spec.kind](spec, text)
