"""Turns a PromptSpec into the text shown for one attempt."""

from typing import Callable

from simple_interaction.models.answer_kind import AnswerKind
from simple_interaction.models.prompt_spec import PromptSpec


def _render_yes_no(spec: PromptSpec) -> str:
    return f"{spec.message} [y/n]:"


def _render_number(spec: PromptSpec) -> str:
    lines = [spec.message]
    for i, choice in enumerate(spec.choices, 1):
        lines.append(f"{i}. {choice}")
    return "\n".join(lines)


def _render_word(spec: PromptSpec) -> str:
    return f"{spec.message}:"


RENDERERS: dict[AnswerKind, Callable[[PromptSpec], str]] = {
    AnswerKind.YES_NO: _render_yes_no,
    AnswerKind.NUMBER: _render_number,
    AnswerKind.WORD: _render_word,
}


def render(spec: PromptSpec) -> str:
    """Render the question, followed by the prompt marker on its own line if set."""
    text = RENDERERS[spec.kind](spec)
    if spec.prompt_marker is not None:
        text = f"{text}\n{spec.prompt_marker}"
    return text
