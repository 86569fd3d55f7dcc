"""
Question Models - Immutable quiz data.

A QuestionItem is source material (one prompt and its right answer).
A Question is what the player sees: the prompt plus a fixed, ordered
set of options, one of which is correct.
"""

from __future__ import annotations
from dataclasses import dataclass


# An answer is the option_id the player picked.
Answer = str


@dataclass(frozen=True)
class QuestionItem:
    """A pool entry that questions are generated from."""
    item_id: str
    prompt: str
    answer: str


@dataclass(frozen=True)
class Option:
    """One selectable option of a question."""
    option_id: str
    label: str


@dataclass(frozen=True)
class Question:
    """
    A multiple-choice question.

    The engine treats it as opaque except for `correct_option`,
    which is compared against the submitted answer.
    """
    question_id: str
    prompt: str
    options: tuple[Option, ...]
    correct_option: str

    def is_correct(self, answer: Answer) -> bool:
        """Single equality check, no partial credit."""
        return answer == self.correct_option

    def get_option(self, option_id: str) -> Option | None:
        for option in self.options:
            if option.option_id == option_id:
                return option
        return None


@dataclass(frozen=True)
class AnsweredQuestion:
    """A question together with the answer given for it."""
    question: Question
    answer: Answer

    @property
    def is_correct(self) -> bool:
        return self.question.is_correct(self.answer)
