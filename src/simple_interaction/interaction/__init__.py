from simple_interaction.interaction.errors import (
    EndOfInputError,
    ExhaustedRetriesError,
    InteractionError,
    WrongAnswerKindError,
)
from simple_interaction.interaction.loop import DEFAULT_INVALID_MESSAGE, interact, interact_ex
from simple_interaction.interaction.accessors import interact_number, interact_word, interact_yesno

__all__ = [
    "EndOfInputError",
    "ExhaustedRetriesError",
    "InteractionError",
    "WrongAnswerKindError",
    "DEFAULT_INVALID_MESSAGE",
    "interact",
    "interact_ex",
    "interact_number",
    "interact_word",
    "interact_yesno",
]
