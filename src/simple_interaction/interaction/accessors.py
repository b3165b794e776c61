"""Convenience wrappers returning a bare bool / int / str."""

import sys
from typing import Optional, TextIO

from simple_interaction.interaction.errors import WrongAnswerKindError
from simple_interaction.interaction.loop import DEFAULT_INVALID_MESSAGE, interact_ex
from simple_interaction.models.answer import AnswerValue
from simple_interaction.models.answer_kind import AnswerKind
from simple_interaction.models.prompt_spec import PromptSpec


def _run_expecting(
    expected: AnswerKind,
    spec: PromptSpec,
    input_stream,
    output_stream: Optional[TextIO],
    invalid_message: str,
) -> AnswerValue:
    if input_stream is None:
        input_stream = sys.stdin
    answer = interact_ex(spec, input_stream, output_stream, invalid_message=invalid_message)
    if answer.kind is not expected:
        raise WrongAnswerKindError(expected, answer.kind)
    return answer


def interact_yesno(
    spec: PromptSpec,
    input_stream=None,
    output_stream: Optional[TextIO] = None,
    invalid_message: str = DEFAULT_INVALID_MESSAGE,
) -> bool:
    return _run_expecting(AnswerKind.YES_NO, spec, input_stream, output_stream, invalid_message).value


def interact_number(
    spec: PromptSpec,
    input_stream=None,
    output_stream: Optional[TextIO] = None,
    invalid_message: str = DEFAULT_INVALID_MESSAGE,
) -> int:
    """Returns the 1-based position of the chosen item."""
    return _run_expecting(AnswerKind.NUMBER, spec, input_stream, output_stream, invalid_message).value


def interact_word(
    spec: PromptSpec,
    input_stream=None,
    output_stream: Optional[TextIO] = None,
    invalid_message: str = DEFAULT_INVALID_MESSAGE,
) -> str:
    return _run_expecting(AnswerKind.WORD, spec, input_stream, output_stream, invalid_message).value
