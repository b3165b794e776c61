from simple_interaction.models.answer_kind import AnswerKind


class InteractionError(Exception):
    """Base class for failures raised by the interaction loop."""
    pass


class ExhaustedRetriesError(InteractionError):
    """Raised when max_attempts invalid answers were given in a row."""

    def __init__(self, attempts: int):
        super().__init__(
            f"Failed to get an appropriate selection from the user after {attempts} attempt(s)"
        )
        self.attempts = attempts


class EndOfInputError(InteractionError, EOFError):
    """Raised when input ends before a valid answer on a prompt without max_attempts."""

    def __init__(self, attempts: int):
        super().__init__(f"Input ended after {attempts} attempt(s) without a valid answer")
        self.attempts = attempts


class WrongAnswerKindError(InteractionError, TypeError):
    """Raised by the typed accessors when the prompt kind does not match the accessor."""

    def __init__(self, expected: AnswerKind, actual: AnswerKind):
        super().__init__(f"Expected a {expected.value} answer but the prompt produced {actual.value}")
        self.expected = expected
        self.actual = actual
