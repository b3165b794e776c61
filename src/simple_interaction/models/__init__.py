from simple_interaction.models.answer_kind import AnswerKind
from simple_interaction.models.answer import AnswerValue, YesNoAnswer, NumberAnswer, WordAnswer
from simple_interaction.models.prompt_spec import (
    DEFAULT_CHOICE_PROMPT_MARKER,
    PromptSpec,
    spec_from_choice_list,
    spec_from_word_message,
    spec_from_yesno_message,
)

__all__ = [
    "AnswerKind",
    "AnswerValue",
    "YesNoAnswer",
    "NumberAnswer",
    "WordAnswer",
    "DEFAULT_CHOICE_PROMPT_MARKER",
    "PromptSpec",
    "spec_from_choice_list",
    "spec_from_word_message",
    "spec_from_yesno_message",
]
