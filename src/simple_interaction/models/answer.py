"""Typed answers returned by a successful interaction.

Exactly one class per AnswerKind. A NumberAnswer holds the 1-based position of
the selected choice, never a zero-based index.
"""

from dataclasses import dataclass
from typing import Union

from simple_interaction.models.answer_kind import AnswerKind


@dataclass(frozen=True)
class YesNoAnswer:
    value: bool

    @property
    def kind(self) -> AnswerKind:
        return AnswerKind.YES_NO


@dataclass(frozen=True)
class NumberAnswer:
    value: int

    @property
    def kind(self) -> AnswerKind:
        return AnswerKind.NUMBER


@dataclass(frozen=True)
class WordAnswer:
    value: str

    @property
    def kind(self) -> AnswerKind:
        return AnswerKind.WORD


AnswerValue = Union[YesNoAnswer, NumberAnswer, WordAnswer]
