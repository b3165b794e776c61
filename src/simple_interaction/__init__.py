# Simple Interaction - terminal prompts with typed answers

__version__ = "0.1.0"

from simple_interaction.models import (
    AnswerKind,
    AnswerValue,
    NumberAnswer,
    PromptSpec,
    WordAnswer,
    YesNoAnswer,
    spec_from_choice_list,
    spec_from_word_message,
    spec_from_yesno_message,
)
from simple_interaction.rendering import render
from simple_interaction.validation import validate
from simple_interaction.interaction import (
    EndOfInputError,
    ExhaustedRetriesError,
    InteractionError,
    WrongAnswerKindError,
    interact,
    interact_ex,
    interact_number,
    interact_word,
    interact_yesno,
)

__all__ = [
    "__version__",
    "AnswerKind",
    "AnswerValue",
    "NumberAnswer",
    "PromptSpec",
    "WordAnswer",
    "YesNoAnswer",
    "spec_from_choice_list",
    "spec_from_word_message",
    "spec_from_yesno_message",
    "render",
    "validate",
    "EndOfInputError",
    "ExhaustedRetriesError",
    "InteractionError",
    "WrongAnswerKindError",
    "interact",
    "interact_ex",
    "interact_number",
    "interact_word",
    "interact_yesno",
]
