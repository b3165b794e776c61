"""Walk-through of the three prompt kinds: a dinner and drink order."""

from typing import Optional, TextIO

from simple_interaction.interaction.accessors import interact_number, interact_word, interact_yesno
from simple_interaction.models.prompt_spec import (
    spec_from_choice_list,
    spec_from_word_message,
    spec_from_yesno_message,
)


def run_demo(input_stream=None, output_stream: Optional[TextIO] = None, max_attempts: Optional[int] = None) -> str:
    """Ask the demo questions and return the closing summary line."""
    yesno_spec = spec_from_yesno_message("Do you like apples?")
    yesno_spec.max_attempts = max_attempts
    likes_apples = interact_yesno(yesno_spec, input_stream, output_stream)

    first_choice = "apples" if likes_apples else "bananas"
    dinner_choices = [first_choice, "pizza", "ravioli"]
    dinner_spec = spec_from_choice_list(dinner_choices)
    dinner_spec.description = "What would you like to eat?"
    dinner_spec.max_attempts = max_attempts
    wants_to_eat = interact_number(dinner_spec, input_stream, output_stream)

    drink_spec = spec_from_word_message("What would you like to drink?")
    drink_spec.max_attempts = max_attempts
    drink = interact_word(drink_spec, input_stream, output_stream)

    return f"You chose to drink {drink} with your meal of {dinner_choices[wants_to_eat - 1]}"
