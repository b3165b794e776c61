from enum import Enum


class AnswerKind(str, Enum):
    """Shape of answer a prompt expects."""

    YES_NO = "yes_no"
    NUMBER = "number"
    WORD = "word"

    @classmethod
    def from_string(cls, value: str) -> "AnswerKind":
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        for candidate in cls:
            if candidate.value == normalized:
                return candidate
        raise ValueError(f"Unsupported answer kind: {value}")
