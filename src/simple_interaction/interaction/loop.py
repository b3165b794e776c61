"""Read-validate-retry loop.

``interact_ex`` takes explicit streams and is what tests and embedding
applications call. ``interact`` binds the process's stdin/stdout.
"""

import sys
from typing import Optional, TextIO

from simple_interaction.interaction.errors import EndOfInputError, ExhaustedRetriesError
from simple_interaction.logging import get_logger
from simple_interaction.models.answer import AnswerValue
from simple_interaction.models.prompt_spec import PromptSpec
from simple_interaction.rendering.renderer import render
from simple_interaction.validation.validator import validate


DEFAULT_INVALID_MESSAGE = (
    "You entered '{input}' which doesn't seem to be a valid selection. Please try again, or exit"
)


def _read_line(input_stream) -> str:
    line = input_stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return line


def _display(output_stream: TextIO, text: str, end: str = "\n") -> None:
    output_stream.write(f"{text}{end}")
    output_stream.flush()


def interact_ex(
    spec: PromptSpec,
    input_stream,
    output_stream: Optional[TextIO] = None,
    invalid_message: str = DEFAULT_INVALID_MESSAGE,
) -> AnswerValue:
    """Ask the question until a valid answer is read.

    Args:
        spec: The question to ask. Not modified.
        input_stream: Anything with ``readline()`` returning str or bytes.
        output_stream: Where prompts and diagnostics go (stdout if None).
        invalid_message: Diagnostic template; ``{input}`` is the rejected text.

    Raises:
        ExhaustedRetriesError: ``spec.max_attempts`` invalid answers were read.
        EndOfInputError: The stream ended before a valid answer on an
            unbounded prompt. Bounded prompts treat end of input as an
            empty answer and end in ExhaustedRetriesError.
        Exceptions raised by ``readline()`` propagate unchanged.
    """
    logger = get_logger()
    if output_stream is None:
        output_stream = sys.stdout

    # Long descriptions are shown once, never on retry
    if spec.description is not None:
        _display(output_stream, spec.description)

    prompt = render(spec)
    # A marker cues typing on the same line
    end = "" if spec.prompt_marker is not None else "\n"

    attempts = 0
    while True:
        _display(output_stream, prompt, end=end)
        line = _read_line(input_stream)
        # An exhausted stream reads as an empty answer
        at_end = not line
        # Only trailing whitespace is dropped; leading spaces reach the validator
        text = line.rstrip()

        answer = validate(spec, text)
        if answer is not None:
            logger.trace("Accepted answer", kind=answer.kind.value, attempts=attempts + 1)
            return answer

        # Unbounded prompts would otherwise spin on a closed stream
        if at_end and spec.max_attempts is None:
            logger.warning("Input ended before a valid answer", question=spec.message, attempts=attempts)
            raise EndOfInputError(attempts)

        _display(output_stream, invalid_message.format(input=text))
        attempts += 1
        logger.debug("Rejected input", input=text, attempt=attempts)
        if spec.max_attempts is not None and attempts >= spec.max_attempts:
            logger.warning("No valid answer within max_attempts", question=spec.message, attempts=attempts)
            raise ExhaustedRetriesError(attempts)


def interact(spec: PromptSpec, invalid_message: str = DEFAULT_INVALID_MESSAGE) -> AnswerValue:
    """Like interact_ex, reading from stdin and writing to stdout."""
    return interact_ex(spec, sys.stdin, sys.stdout, invalid_message=invalid_message)
