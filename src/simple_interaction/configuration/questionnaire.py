"""Questionnaires: ordered sets of prompts described in a YAML file.

Example::

    questions:
      - key: likes_apples
        kind: yes_no
        message: Do you like apples?
      - key: dinner
        kind: number
        message: What would you like to eat?
        choices: [apples, pizza, ravioli]
        max_attempts: 3
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

import yaml

from simple_interaction.configuration.settings import InteractionSettings, apply_settings
from simple_interaction.interaction.accessors import interact_number, interact_word, interact_yesno
from simple_interaction.models.answer_kind import AnswerKind
from simple_interaction.models.prompt_spec import PromptSpec


class QuestionnaireError(ValueError):
    """Raised when a questionnaire document is malformed."""
    pass


@dataclass(frozen=True)
class Question:
    key: str
    spec: PromptSpec


_ACCESSORS = {
    AnswerKind.YES_NO: interact_yesno,
    AnswerKind.NUMBER: interact_number,
    AnswerKind.WORD: interact_word,
}

_ALLOWED_FIELDS = {"key", "kind", "message", "description", "choices", "max_attempts", "prompt_marker"}


def _parse_question(index: int, entry) -> Question:
    if not isinstance(entry, dict):
        raise QuestionnaireError(f"Question #{index} must be a mapping")

    unknown = set(entry) - _ALLOWED_FIELDS
    if unknown:
        raise QuestionnaireError(f"Question #{index} has unknown fields: {', '.join(sorted(unknown))}")

    key = entry.get("key")
    if not key:
        raise QuestionnaireError(f"Question #{index} is missing 'key'")

    try:
        kind = AnswerKind.from_string(str(entry.get("kind", "")))
    except ValueError as exc:
        raise QuestionnaireError(f"Question '{key}': {exc}") from exc

    choices = entry.get("choices") or []
    if not isinstance(choices, list):
        raise QuestionnaireError(f"Question '{key}': 'choices' must be a list")
    if choices and kind is not AnswerKind.NUMBER:
        raise QuestionnaireError(f"Question '{key}': only number questions take choices")

    try:
        spec = PromptSpec(
            kind=kind,
            message=str(entry.get("message", "")),
            description=entry.get("description"),
            choices=[str(choice) for choice in choices],
            max_attempts=entry.get("max_attempts"),
            prompt_marker=entry.get("prompt_marker"),
        )
    except ValueError as exc:
        raise QuestionnaireError(f"Question '{key}': {exc}") from exc

    return Question(key=str(key), spec=spec)


def parse_questionnaire(data) -> list[Question]:
    if not isinstance(data, dict) or not isinstance(data.get("questions"), list):
        raise QuestionnaireError("Questionnaire must contain a 'questions' list")

    questions = [_parse_question(i, entry) for i, entry in enumerate(data["questions"], 1)]
    keys = [q.key for q in questions]
    duplicates = sorted({k for k in keys if keys.count(k) > 1})
    if duplicates:
        raise QuestionnaireError(f"Duplicate question keys: {', '.join(duplicates)}")
    return questions


def load_questionnaire(path: Union[str, Path]) -> list[Question]:
    """Load an ordered list of questions from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Questionnaire not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise QuestionnaireError(f"Invalid YAML in {path}: {exc}") from exc
    return parse_questionnaire(data)


def run_questionnaire(
    questions: Iterable[Question],
    settings: Optional[InteractionSettings] = None,
    input_stream=None,
    output_stream: Optional[TextIO] = None,
) -> dict:
    """Ask each question in order and return {key: answer}."""
    settings = settings or InteractionSettings()
    answers = {}
    for question in questions:
        spec = apply_settings(question.spec, settings)
        accessor = _ACCESSORS[spec.kind]
        answers[question.key] = accessor(
            spec,
            input_stream=input_stream,
            output_stream=output_stream,
            invalid_message=settings.invalid_message,
        )
    return answers
