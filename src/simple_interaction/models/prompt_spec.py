from dataclasses import dataclass, field
from typing import Iterable, Optional

from simple_interaction.models.answer_kind import AnswerKind


DEFAULT_CHOICE_PROMPT_MARKER = "> "


@dataclass
class PromptSpec:
    """Describes a single question put to the user.

    ``description`` is shown once before the first attempt. ``max_attempts``
    of None retries forever. ``prompt_marker`` is shown on its own line after
    the question. A NUMBER spec without choices can be built but no input
    will ever satisfy it.
    """

    kind: AnswerKind
    message: str
    description: Optional[str] = None
    choices: list[str] = field(default_factory=list)
    max_attempts: Optional[int] = None
    prompt_marker: Optional[str] = None

    def __post_init__(self):
        self.kind = AnswerKind(self.kind)
        self.choices = list(self.choices)
        if self.max_attempts is not None:
            if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
                raise ValueError(f"max_attempts must be an integer, got {self.max_attempts!r}")
            if self.max_attempts < 1:
                raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")


def spec_from_yesno_message(message: str) -> PromptSpec:
    """Build a yes/no question, e.g. ``spec_from_yesno_message("Continue?")``."""
    return PromptSpec(kind=AnswerKind.YES_NO, message=message)


def spec_from_choice_list(choices: Iterable[str]) -> PromptSpec:
    """Build a numbered-choice question from the choices in order."""
    return PromptSpec(
        kind=AnswerKind.NUMBER,
        message="",
        choices=[str(choice) for choice in choices],
        prompt_marker=DEFAULT_CHOICE_PROMPT_MARKER,
    )


def spec_from_word_message(message: str) -> PromptSpec:
    """Build a free-text question."""
    return PromptSpec(kind=AnswerKind.WORD, message=message)
