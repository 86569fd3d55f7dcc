"""
Question Generator - Turns a pool of question items into questions.

Each question is built from one pool item: its prompt, its answer as the
correct option, and answers of other items as distractors.

A pool that cannot supply the requested count is an error. Returning a
short list would start a game with fewer questions than configured.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from string import ascii_lowercase
from typing import Sequence
import random

from .models import Option, Question, QuestionItem


DEFAULT_OPTIONS_PER_QUESTION = 4


class InsufficientPoolError(ValueError):
    """The question-item pool is smaller than the requested question count."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot generate {requested} questions from a pool of {available} items"
        )


class QuestionGenerator(ABC):
    """
    Interface for question generation.

    Implementations always return exactly `count` questions or raise.
    """

    def __init__(self, options_per_question: int = DEFAULT_OPTIONS_PER_QUESTION):
        if options_per_question < 2:
            raise ValueError("options_per_question must be at least 2")
        if options_per_question > len(ascii_lowercase):
            raise ValueError(
                f"options_per_question must be at most {len(ascii_lowercase)}"
            )
        self.options_per_question = options_per_question

    def generate(self, count: int, items: Sequence[QuestionItem]) -> list[Question]:
        """Generate `count` questions from distinct pool items."""
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        if len(items) < count:
            raise InsufficientPoolError(requested=count, available=len(items))

        chosen = self._select_items(count, items)
        return [self._build_question(item, items) for item in chosen]

    @abstractmethod
    def _select_items(
        self, count: int, items: Sequence[QuestionItem]
    ) -> list[QuestionItem]:
        """Pick which items become questions, in presentation order."""
        pass

    @abstractmethod
    def _order_labels(self, labels: list[str]) -> list[str]:
        """Order the option labels (correct answer is first on input)."""
        pass

    def _pick_distractors(
        self, item: QuestionItem, items: Sequence[QuestionItem]
    ) -> list[str]:
        """Distinct answers of other items, in pool order."""
        seen = {item.answer}
        distractors = []
        for other in items:
            if other.answer not in seen:
                seen.add(other.answer)
                distractors.append(other.answer)
        return distractors

    def _build_question(
        self, item: QuestionItem, items: Sequence[QuestionItem]
    ) -> Question:
        distractors = self._pick_distractors(item, items)
        labels = [item.answer] + distractors[: self.options_per_question - 1]
        labels = self._order_labels(labels)

        options = tuple(
            Option(option_id=ascii_lowercase[i], label=label)
            for i, label in enumerate(labels)
        )
        correct = next(o.option_id for o in options if o.label == item.answer)
        return Question(
            question_id=item.item_id,
            prompt=item.prompt,
            options=options,
            correct_option=correct,
        )


class RandomQuestionGenerator(QuestionGenerator):
    """
    Random item selection and option order.

    Pass a seeded `random.Random` for reproducible games.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        options_per_question: int = DEFAULT_OPTIONS_PER_QUESTION,
    ):
        super().__init__(options_per_question)
        self.rng = rng or random.Random()

    def _select_items(self, count, items):
        return self.rng.sample(list(items), count)

    def _pick_distractors(self, item, items):
        distractors = super()._pick_distractors(item, items)
        self.rng.shuffle(distractors)
        return distractors

    def _order_labels(self, labels):
        labels = list(labels)
        self.rng.shuffle(labels)
        return labels


class SequentialQuestionGenerator(QuestionGenerator):
    """Takes items in pool order and lists the correct answer first."""

    def _select_items(self, count, items):
        return list(items[:count])

    def _order_labels(self, labels):
        return list(labels)


def make_questions(
    count: int,
    items: Sequence[QuestionItem],
    rng: random.Random | None = None,
    options_per_question: int = DEFAULT_OPTIONS_PER_QUESTION,
) -> list[Question]:
    """
    Convenience function to generate questions.

    Creates a RandomQuestionGenerator and generates `count` questions.
    """
    generator = RandomQuestionGenerator(rng=rng, options_per_question=options_per_question)
    return generator.generate(count, items)
